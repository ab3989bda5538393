import pool_backend.pool_action.messages as messages


class BasePoolActionException(Exception):

    def __str__(self, *args, **kwargs):
        return self.message


# =============================================================================
# System errors
# =============================================================================
class CommandNotAvailableError(BasePoolActionException):

    def __init__(self, command, error):
        super().__init__()
        self.command = command
        self.message = messages.COMMAND_NOT_AVAILABLE_ERROR_MESSAGE.format(command, error)


class FailedExecError(BasePoolActionException):

    def __init__(self, command, stderr):
        super().__init__()
        self.command = command
        self.stderr = stderr
        self.message = messages.FAILED_EXEC_ERROR_MESSAGE.format(command, stderr.strip())


class CommandTimeoutError(FailedExecError):

    def __init__(self, command, timeout):
        super().__init__(command, "")
        self.timeout = timeout
        self.message = messages.COMMAND_TIMEOUT_ERROR_MESSAGE.format(command, timeout)


class FailedParsingError(BasePoolActionException):

    def __init__(self, details):
        super().__init__()
        self.details = details
        self.message = messages.FAILED_PARSING_ERROR_MESSAGE.format(details)


# =============================================================================
# Pool and volume errors
# =============================================================================
class InvalidArgumentError(BasePoolActionException):

    def __init__(self, msg=""):
        super().__init__()
        self.message = "{0}".format(msg)


class UnsupportedParameterError(InvalidArgumentError):

    def __init__(self, parameter, value):
        message = messages.UNSUPPORTED_PARAMETER_ERROR_MESSAGE.format(parameter, value)
        super().__init__(message)


class UnsupportedPoolTypeError(InvalidArgumentError):

    def __init__(self, pool_type):
        message = messages.UNSUPPORTED_POOL_TYPE_ERROR_MESSAGE.format(pool_type)
        super().__init__(message)


class ObjectNotFoundError(BasePoolActionException):

    def __init__(self, name):
        super().__init__()
        self.name = name
        self.message = messages.OBJECT_NOT_FOUND_ERROR_MESSAGE.format(name)


class PoolNotFoundError(ObjectNotFoundError):

    def __init__(self, name):
        super().__init__(name)
        self.message = messages.POOL_NOT_FOUND_ERROR_MESSAGE.format(name)


class VolumeNotFoundError(ObjectNotFoundError):

    def __init__(self, name):
        super().__init__(name)
        self.message = messages.VOLUME_NOT_FOUND_ERROR_MESSAGE.format(name)


class PoolDevicesReleaseError(FailedExecError):

    def __init__(self, pool, devices, error):
        super().__init__(error.command, error.stderr)
        self.pool = pool
        self.devices = devices
        self.message = messages.POOL_DEVICES_RELEASE_ERROR_MESSAGE.format(pool, ", ".join(devices), error)
