import shlex
import subprocess
from dataclasses import dataclass

import pool_backend.pool_action.errors as pool_errors
import pool_backend.pool_action.messages as messages
from pool_backend.common.pool_logger import get_logger
from pool_backend.common.settings import COMMAND_TIMEOUT_SECONDS
from pool_backend.pool_action.utils import UTF_8

logger = get_logger()


@dataclass()
class CommandResult:
    command: list
    stdout: bytes
    stderr: bytes
    return_code: int

    @property
    def succeeded(self):
        return self.return_code == 0

    @property
    def command_line(self):
        return shlex.join(self.command)

    def decoded_stderr(self):
        try:
            return self.stderr.decode(UTF_8)
        except UnicodeDecodeError:
            return messages.UNDECODABLE_STDERR_MESSAGE


def run_command(command_name, args, timeout=COMMAND_TIMEOUT_SECONDS):
    """
    Runs an external command synchronously and captures its output.
    A nonzero exit status is returned as an unsuccessful CommandResult, not raised.

    Args:
        command_name : executable to run
        args         : ordered list of arguments
        timeout      : seconds to wait before the process is killed

    Returns:
        CommandResult

    Raises:
        CommandNotAvailableError : the executable could not be started
        CommandTimeoutError
    """
    command = [command_name] + list(args)
    command_line = shlex.join(command)
    logger.debug("running command : {0}".format(command_line))
    try:
        process = subprocess.run(command, stdout=subprocess.PIPE, stderr=subprocess.PIPE,
                                 check=False, timeout=timeout)
    except subprocess.TimeoutExpired:
        logger.error("command timed out after {0} seconds : {1}".format(timeout, command_line))
        raise pool_errors.CommandTimeoutError(command_line, timeout)
    except OSError as ex:
        logger.error("could not run command {0} : {1}".format(command_line, ex))
        raise pool_errors.CommandNotAvailableError(command_line, ex)

    result = CommandResult(command=command, stdout=process.stdout or b"", stderr=process.stderr or b"",
                           return_code=process.returncode)
    if not result.succeeded:
        logger.debug("command {0} exited with code {1}".format(command_line, result.return_code))
    return result
