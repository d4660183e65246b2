from .error_strings import (
    REDUCE_EMPTY_NO_INITIAL as REDUCE_EMPTY_NO_INITIAL,
    NOT_CALLABLE as NOT_CALLABLE,
    InvalidOperation as InvalidOperation,
)

from .callbacks import adapt_callback as adapt_callback

from .logging_config import configure_logging as configure_logging
