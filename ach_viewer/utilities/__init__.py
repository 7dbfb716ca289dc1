from .config_logging import LOGGING, configure_logging
from .core_util import open_for_read, split_lines

__all__ = [
    "open_for_read",
    "split_lines",
    "LOGGING",
    "configure_logging",
]
