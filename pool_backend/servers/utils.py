import os.path
import re

import pool_backend.servers.messages as messages
import pool_backend.servers.settings as servers_settings
from pool_backend.common.pool_logger import get_logger
from pool_backend.servers.errors import ValidationException

logger = get_logger()


def _validate_name(name, field_name):
    if not name:
        raise ValidationException(messages.PARAMETER_SHOULD_NOT_BE_EMPTY_MESSAGE.format(field_name))
    if not isinstance(name, str) or name in servers_settings.LVM_RESERVED_NAMES or \
            not re.fullmatch(servers_settings.LVM_NAME_PATTERN, name):
        raise ValidationException(messages.NAME_IS_NOT_VALID_LVM_NAME_MESSAGE.format(field_name, name))


def _validate_devices(devices):
    if not devices:
        raise ValidationException(messages.DEVICES_SHOULD_NOT_BE_EMPTY_MESSAGE)
    for device in devices:
        if not device or not os.path.isabs(device):
            raise ValidationException(messages.DEVICE_PATH_SHOULD_BE_ABSOLUTE_MESSAGE.format(device))
    if len(set(devices)) != len(devices):
        raise ValidationException(messages.DUPLICATE_DEVICES_MESSAGE.format(devices))


def _validate_size(size):
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValidationException(messages.SIZE_SHOULD_BE_POSITIVE_INTEGER_MESSAGE.format(size))


def validate_create_pool_request(request):
    logger.debug("validating create pool request")
    _validate_name(request.name, servers_settings.POOL_NAME_FIELD)
    _validate_devices(request.devices)
    logger.debug("create pool validation finished")


def validate_pool_request(request):
    _validate_name(request.name, servers_settings.POOL_NAME_FIELD)


def validate_create_volume_request(request):
    logger.debug("validating create volume request")
    _validate_name(request.uuid, servers_settings.VOLUME_UUID_FIELD)
    _validate_name(request.pool, servers_settings.VOLUME_POOL_FIELD)
    _validate_size(request.size)
    if isinstance(request.share, bool) or not isinstance(request.share, int):
        raise ValidationException(messages.SHARE_SHOULD_BE_INTEGER_MESSAGE.format(request.share))
    logger.debug("create volume validation finished")


def validate_volume_request(request):
    _validate_name(request.uuid, servers_settings.VOLUME_UUID_FIELD)


def generate_pool_response(pool):
    return {
        "name": pool.name,
        "devices": list(pool.devices),
        "capacity": pool.capacity,
        "used": pool.used,
        "free": pool.free,
    }


def generate_replica_response(replica):
    return {
        "uuid": replica.uuid,
        "pool": replica.pool,
        "size": replica.size,
        "thin": replica.thin,
        "share": replica.share,
        "uri": replica.uri,
    }
