import pool_backend.pool_action.errors as pool_errors
from pool_backend.common.pool_logger import get_logger
from pool_backend.servers.errors import ValidationException, ObjectAlreadyProcessingError

logger = get_logger()

EXIT_CODE_INTERNAL = 1

exit_codes_by_exception = {
    pool_errors.ObjectNotFoundError: 2,
    ValidationException: 3,
    pool_errors.InvalidArgumentError: 3,
    pool_errors.FailedParsingError: 4,
    pool_errors.FailedExecError: 5,
    pool_errors.CommandNotAvailableError: 6,
    ObjectAlreadyProcessingError: 7,
}


def get_exit_code(exception):
    for exception_type in type(exception).__mro__:
        exit_code = exit_codes_by_exception.get(exception_type)
        if exit_code is not None:
            return exit_code
    return EXIT_CODE_INTERNAL


def handle_exception(exception):
    exit_code = get_exit_code(exception)
    if exit_code == EXIT_CODE_INTERNAL:
        logger.exception(exception)
    else:
        logger.error(exception)
    return exit_code
