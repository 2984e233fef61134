import math
from functools import wraps


def format_number(value: float) -> str:
    """
    Formats float the short way: integral values lose their fractional part
    :param value: number to format
    :return: '3' for 3.0, '-0' for -0.0, '0.5' for 0.5, 'inf' and 'nan' as is
    """
    if value.is_integer():
        if value == 0 and math.copysign(1, value) < 0:
            return "-0"
        return str(int(value))
    return repr(value)


def log_exception(func):

    """Decorator to automatically log exceptions"""

    @wraps(func)
    def wrapper(self, *args, **kwargs):

        try:
            return func(self, *args, **kwargs)
        except Exception as e:
            self.logger.exception(f"Exception in {func.__name__}: {e}")
            raise

    return wrapper
