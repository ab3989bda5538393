from pool_backend.common.config import config

POOL_TYPE_LVM = config.pool_types.lvm
DEFAULT_POOL_TYPE = config.default_pool_type

DEVICE_DIRECTORY = config.lvm.device_directory
COMMAND_TIMEOUT_SECONDS = config.lvm.command_timeout_seconds

ROLLBACK_FAILED_POOL_CREATION = config.pool.rollback_failed_creation
POOL_ROLLBACK_RETRIES = config.pool.rollback_retries

SHARE_PROTOCOL_NONE = 0
URI_PATH_SEPARATOR = "/"
DEVICES_SEPARATOR = ","
