import threading


def set_current_thread_name(name):
    """
    Sets current thread name if name not None or empty string

    Args:
        name : name to set
    """
    if name:
        current_thread = threading.current_thread()
        current_thread.name = name


def string_to_array(str_val, separator):
    """
    Args
        str_val : string value
        separator : string separator
    Return
        List as splitted string by separator after stripping whitespaces from each element
    """
    if not str_val:
        return []
    res = [value.strip() for value in str_val.split(separator)]
    return [value for value in res if value]
