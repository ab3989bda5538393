COMMAND_NOT_AVAILABLE_ERROR_MESSAGE = "Could not run command : {0} . error : {1}"

FAILED_EXEC_ERROR_MESSAGE = "Command failed : {0} . error : {1}"

COMMAND_TIMEOUT_ERROR_MESSAGE = "Command : {0} did not finish within {1} seconds"

UNDECODABLE_STDERR_MESSAGE = "command failed with undecodable error output"

FAILED_PARSING_ERROR_MESSAGE = "Invalid report output. Details : {0}"

OBJECT_NOT_FOUND_ERROR_MESSAGE = "Object was not found : {0} "

POOL_NOT_FOUND_ERROR_MESSAGE = "Pool was not found : {0} "

VOLUME_NOT_FOUND_ERROR_MESSAGE = "Volume was not found : {0} "

UNSUPPORTED_PARAMETER_ERROR_MESSAGE = "Parameter {0} is not supported with value : {1}"

UNSUPPORTED_POOL_TYPE_ERROR_MESSAGE = "Unsupported pool type : {0}"

POOL_DEVICES_RELEASE_ERROR_MESSAGE = "Pool : {0} was removed but devices : {1} were not released. error : {2}"

# report parsing details
UNDECODABLE_OUTPUT_DETAILS = "output of {0} is not valid text"
INVALID_JSON_DETAILS = "output of {0} is not valid json : {1}"
MISSING_REPORT_DETAILS = "output of {0} has no '{1}' list"
MISSING_SECTION_DETAILS = "report entry of {0} has no '{1}' list"
INVALID_ROW_DETAILS = "row of {0} is not an object : {1}"
MISSING_FIELD_DETAILS = "row of {0} is missing field '{1}' : {2}"
NOT_UNSIGNED_INTEGER_DETAILS = "field '{0}' is not an unsigned integer : {1}"
NO_ROWS_DETAILS = "{0} returned no rows"
FREE_EXCEEDS_CAPACITY_DETAILS = "free bytes {0} exceed capacity bytes {1}"
