"""
A container type for values that may or may not be present.
"""

from .__version__ import __version__, __version_info__  # isort: skip

from .errors import AbsentValueError, NoValuePresentError
from .logging import reset_logger, setup_logger
from .optional import Optional

__all__ = [
    "AbsentValueError",
    "NoValuePresentError",
    "Optional",
    "reset_logger",
    "setup_logger",
]

# because logger setup takes place after importing the submodules, it only affects
# log messages emitted at runtime
setup_logger()
