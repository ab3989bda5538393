import pool_backend.pool_action.errors as pool_errors
import pool_backend.pool_action.settings as lvm_settings
from pool_backend.common.pool_logger import get_logger
from pool_backend.common.settings import POOL_TYPE_LVM
from pool_backend.pool_action.command_runner import run_command
from pool_backend.pool_action.lvm_report_reader import (read_pool_size, read_pool_names, read_device_map,
                                                        read_volumes)
from pool_backend.pool_action.pool_action_types import Pool, Replica
from pool_backend.pool_action.pool_mediator_abstract import PoolMediatorAbstract
from pool_backend.pool_action.utils import ClassProperty, unique_in_order

logger = get_logger()


def _report_options(fields):
    return lvm_settings.LVM_OPTIONS_FORMAT.format(",".join(fields))


def build_pool_size_args(name):
    return [_report_options(lvm_settings.VGS_SIZE_FIELDS), lvm_settings.LVM_UNITS_BYTES,
            lvm_settings.LVM_NO_SUFFIX, lvm_settings.LVM_REPORT_FORMAT_JSON, lvm_settings.LVM_END_OF_OPTIONS, name]


def build_pool_names_args():
    return [_report_options(lvm_settings.VGS_NAME_FIELDS), lvm_settings.LVM_REPORT_FORMAT_JSON]


def build_device_map_args():
    return [_report_options(lvm_settings.PVS_DEVICE_MAP_FIELDS), lvm_settings.LVM_REPORT_FORMAT_JSON]


def build_volumes_args():
    return [_report_options(lvm_settings.LVS_VOLUME_FIELDS), lvm_settings.LVM_UNITS_BYTES,
            lvm_settings.LVM_NO_SUFFIX, lvm_settings.LVM_REPORT_FORMAT_JSON]


def build_create_volume_args(uuid, pool, size_in_bytes):
    size = "{0}{1}".format(size_in_bytes, lvm_settings.LVM_BYTES_SUFFIX)
    return [lvm_settings.LVCREATE_SIZE, size, lvm_settings.LVCREATE_NAME, uuid, lvm_settings.LVM_END_OF_OPTIONS, pool]


class LVMPoolMediator(PoolMediatorAbstract):

    @ClassProperty
    def pool_type(self):
        return POOL_TYPE_LVM

    def _run(self, command_name, args):
        result = run_command(command_name, args)
        if not result.succeeded:
            raise pool_errors.FailedExecError(result.command_line, result.decoded_stderr())
        return result

    def initialize_devices(self, devices):
        logger.debug("initializing devices : {0}".format(devices))
        self._run(lvm_settings.PVCREATE_CMD, devices)

    def release_devices(self, devices):
        logger.debug("releasing devices : {0}".format(devices))
        self._run(lvm_settings.PVREMOVE_CMD, devices)

    def create_pool_from_devices(self, name, devices):
        self._run(lvm_settings.VGCREATE_CMD, [lvm_settings.LVM_END_OF_OPTIONS, name] + list(devices))

    def remove_pool(self, name):
        self._run(lvm_settings.VGREMOVE_CMD, [lvm_settings.LVM_END_OF_OPTIONS, name])

    def _get_pool_size(self, name):
        try:
            result = self._run(lvm_settings.VGS_CMD, build_pool_size_args(name))
        except pool_errors.FailedExecError as ex:
            if lvm_settings.VOLUME_GROUP_NOT_FOUND.format(name) in ex.stderr:
                logger.info("pool {0} was not found".format(name))
                raise pool_errors.PoolNotFoundError(name)
            raise ex
        return read_pool_size(result.stdout, result.command_line)

    def _get_pool_devices(self, name):
        result = self._run(lvm_settings.PVS_CMD, build_device_map_args())
        device_map = read_device_map(result.stdout, result.command_line)
        return unique_in_order(record.device for record in device_map if record.pool == name)

    def get_pool(self, name):
        logger.debug("Get pool : {0}".format(name))
        pool_size = self._get_pool_size(name)
        devices = self._get_pool_devices(name)
        return Pool(name=name, capacity=pool_size.capacity, used=pool_size.used, devices=devices)

    def get_pool_names(self):
        result = self._run(lvm_settings.VGS_CMD, build_pool_names_args())
        return [record.name for record in read_pool_names(result.stdout, result.command_line)]

    def create_volume_in_pool(self, uuid, pool, size_in_bytes):
        self._run(lvm_settings.LVCREATE_CMD, build_create_volume_args(uuid, pool, size_in_bytes))

    def list_volumes(self):
        logger.debug("listing volumes")
        result = self._run(lvm_settings.LVS_CMD, build_volumes_args())
        return [Replica(uuid=record.name, pool=record.pool, size=record.size)
                for record in read_volumes(result.stdout, result.command_line)]

    def remove_volume(self, replica):
        self._run(lvm_settings.LVREMOVE_CMD, [lvm_settings.LVREMOVE_FORCE, replica.uri])
