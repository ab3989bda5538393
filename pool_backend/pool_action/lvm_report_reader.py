import json
from dataclasses import dataclass

import pool_backend.pool_action.errors as pool_errors
import pool_backend.pool_action.messages as messages
from pool_backend.pool_action.settings import (REPORT_KEY, VGS_SECTION, PVS_SECTION, LVS_SECTION,
                                               VG_NAME_FIELD, VG_SIZE_FIELD, VG_FREE_FIELD, PV_NAME_FIELD,
                                               LV_NAME_FIELD, LV_SIZE_FIELD)
from pool_backend.pool_action.utils import UTF_8


class LVMReportReader:
    """
    Iterable object used to read the rows of one section of an LVM json report.
    Input is the raw stdout of a report command run with '--reportformat=json', e.g.
    '{"report": [{"vg": [{"vg_name": "tank1"}, {"vg_name": "tank2"}]}]}'
    for section 'vg'. Rows of all report entries are returned in order, each as a dict of strings.
    """

    def __init__(self, raw_output, section, source):
        self._section = section
        self._source = source
        self._rows = self._read_rows(self._load(raw_output))

    def _load(self, raw_output):
        """
        Raises:
            FailedParsingError
        """
        if isinstance(raw_output, bytes):
            try:
                raw_output = raw_output.decode(UTF_8)
            except UnicodeDecodeError:
                raise pool_errors.FailedParsingError(messages.UNDECODABLE_OUTPUT_DETAILS.format(self._source))
        try:
            return json.loads(raw_output)
        except json.decoder.JSONDecodeError as ex:
            raise pool_errors.FailedParsingError(messages.INVALID_JSON_DETAILS.format(self._source, ex))

    def _read_rows(self, parsed_output):
        report = parsed_output.get(REPORT_KEY) if isinstance(parsed_output, dict) else None
        if not isinstance(report, list):
            raise pool_errors.FailedParsingError(messages.MISSING_REPORT_DETAILS.format(self._source, REPORT_KEY))
        rows = []
        for report_entry in report:
            section_rows = report_entry.get(self._section) if isinstance(report_entry, dict) else None
            if not isinstance(section_rows, list):
                raise pool_errors.FailedParsingError(
                    messages.MISSING_SECTION_DETAILS.format(self._source, self._section))
            for row in section_rows:
                if not isinstance(row, dict):
                    raise pool_errors.FailedParsingError(messages.INVALID_ROW_DETAILS.format(self._source, row))
                rows.append(row)
        return rows

    def __iter__(self):
        return iter(self._rows)

    def __len__(self):
        return len(self._rows)


def get_field(row, field_name, source):
    value = row.get(field_name)
    if not isinstance(value, str):
        raise pool_errors.FailedParsingError(messages.MISSING_FIELD_DETAILS.format(source, field_name, row))
    return value.strip()


def parse_unsigned_integer(value, field_name):
    """
    Parses a byte count reported with '--units=b --nosuffix'.
    Signs, decimals and unit suffixes are rejected rather than coerced.

    Raises:
        FailedParsingError
    """
    if not (value.isascii() and value.isdigit()):
        raise pool_errors.FailedParsingError(messages.NOT_UNSIGNED_INTEGER_DETAILS.format(field_name, value))
    return int(value)


@dataclass(frozen=True)
class PoolSizeRecord:
    capacity: int
    free: int

    @property
    def used(self):
        return self.capacity - self.free

    @classmethod
    def from_row(cls, row, source):
        capacity = parse_unsigned_integer(get_field(row, VG_SIZE_FIELD, source), VG_SIZE_FIELD)
        free = parse_unsigned_integer(get_field(row, VG_FREE_FIELD, source), VG_FREE_FIELD)
        if free > capacity:
            raise pool_errors.FailedParsingError(messages.FREE_EXCEEDS_CAPACITY_DETAILS.format(free, capacity))
        return cls(capacity=capacity, free=free)


@dataclass(frozen=True)
class PoolNameRecord:
    name: str

    @classmethod
    def from_row(cls, row, source):
        return cls(name=get_field(row, VG_NAME_FIELD, source))


@dataclass(frozen=True)
class DeviceMapRecord:
    device: str
    pool: str

    @classmethod
    def from_row(cls, row, source):
        # devices initialized but not in any pool report an empty vg_name
        return cls(device=get_field(row, PV_NAME_FIELD, source), pool=get_field(row, VG_NAME_FIELD, source))


@dataclass(frozen=True)
class VolumeRecord:
    name: str
    pool: str
    size: int

    @classmethod
    def from_row(cls, row, source):
        return cls(name=get_field(row, LV_NAME_FIELD, source),
                   pool=get_field(row, VG_NAME_FIELD, source),
                   size=parse_unsigned_integer(get_field(row, LV_SIZE_FIELD, source), LV_SIZE_FIELD))


def read_pool_size(raw_output, source):
    rows = LVMReportReader(raw_output, VGS_SECTION, source)
    if not len(rows):
        raise pool_errors.FailedParsingError(messages.NO_ROWS_DETAILS.format(source))
    first_row = next(iter(rows))
    return PoolSizeRecord.from_row(first_row, source)


def read_pool_names(raw_output, source):
    return [PoolNameRecord.from_row(row, source) for row in LVMReportReader(raw_output, VGS_SECTION, source)]


def read_device_map(raw_output, source):
    return [DeviceMapRecord.from_row(row, source) for row in LVMReportReader(raw_output, PVS_SECTION, source)]


def read_volumes(raw_output, source):
    return [VolumeRecord.from_row(row, source) for row in LVMReportReader(raw_output, LVS_SECTION, source)]
