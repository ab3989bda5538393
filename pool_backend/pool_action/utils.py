import encodings

from pool_backend.common.settings import DEVICE_DIRECTORY, URI_PATH_SEPARATOR

UTF_8 = encodings.utf_8.getregentry().name


def build_volume_uri(pool, uuid):
    return URI_PATH_SEPARATOR.join((DEVICE_DIRECTORY.rstrip(URI_PATH_SEPARATOR), pool, uuid))


def unique_in_order(values):
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


class ClassProperty:

    def __init__(self, function):
        self._function = function

    def __get__(self, instance, owner):
        return self._function(owner)
