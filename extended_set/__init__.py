from .extended_set import ExtendedSet as ExtendedSet

from .utils import (
    InvalidOperation as InvalidOperation,
    configure_logging as configure_logging,
)
