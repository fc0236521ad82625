"""Utilities package"""

from netshare.utils.logger import get_logger, setup_logging
from netshare.utils.validators import (
    validate_volume_name,
    validate_meta_dir,
    validate_log_level,
    parse_bool
)

__all__ = [
    'get_logger',
    'setup_logging',
    'validate_volume_name',
    'validate_meta_dir',
    'validate_log_level',
    'parse_bool',
]
