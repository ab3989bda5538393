import pool_backend.servers.messages as messages


class BaseServerException(Exception):

    def __str__(self, *args, **kwargs):
        return self.message


class ValidationException(BaseServerException):

    def __init__(self, msg):
        super().__init__()
        self.message = messages.VALIDATION_EXCEPTION_MESSAGE.format(msg)


class ObjectAlreadyProcessingError(BaseServerException):
    def __init__(self, object_id_or_name):
        super().__init__()
        self.message = messages.OBJECT_ALREADY_PROCESSING_MESSAGE.format(object_id_or_name)
