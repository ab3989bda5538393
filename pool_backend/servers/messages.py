VALIDATION_EXCEPTION_MESSAGE = "Validation error has occurred : {0}"

OBJECT_ALREADY_PROCESSING_MESSAGE = "object {0} is already processing. request cannot be completed."

# validation error messages
PARAMETER_SHOULD_NOT_BE_EMPTY_MESSAGE = '{} should not be empty'
NAME_IS_NOT_VALID_LVM_NAME_MESSAGE = '{} : "{}" may only contain letters, digits and "+_.-" and not start with "-"'
DEVICES_SHOULD_NOT_BE_EMPTY_MESSAGE = 'at least one device is required'
DEVICE_PATH_SHOULD_BE_ABSOLUTE_MESSAGE = 'device path should be absolute : {}'
DUPLICATE_DEVICES_MESSAGE = 'devices should not repeat : {}'
SIZE_SHOULD_BE_POSITIVE_INTEGER_MESSAGE = 'size should be a positive integer : {}'
SHARE_SHOULD_BE_INTEGER_MESSAGE = 'share should be an integer : {}'
