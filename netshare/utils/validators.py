"""Validation utilities"""

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

TEMP_FILE_SUFFIX = '.tmp'


def is_temp_file_name(segment: str) -> bool:
    """Names of in-progress metadata writes: .<base>.<random>.tmp"""
    return segment.startswith('.') and segment.endswith(TEMP_FILE_SUFFIX)


def validate_volume_name(name: str) -> bool:
    """
    Validate a volume name.

    A name is a relative path of one or more '/'-separated segments.
    Absolute names, empty, '.' or '..' segments, backslashes and NUL
    bytes are rejected so the name can never escape the metadata root.
    Segments shaped like temporary metadata files (.<x>.tmp) are
    rejected because the metadata loader never reads them.
    """
    if not isinstance(name, str) or not name:
        return False
    if name.startswith('/') or '\\' in name or '\x00' in name:
        return False
    return all(segment not in ('', '.', '..') and not is_temp_file_name(segment)
               for segment in name.split('/'))


def validate_meta_dir(meta_dir: str) -> bool:
    """Validate the metadata directory name (a single path segment)"""
    return validate_volume_name(meta_dir) and '/' not in meta_dir


def validate_log_level(level: str) -> bool:
    """Validate log level name"""
    return bool(level) and level.upper() in VALID_LOG_LEVELS


def parse_bool(value) -> bool:
    """Interpret an option value as boolean: only 'yes' and 'true' are truthy"""
    if value is None:
        return False
    return str(value).lower() in ('yes', 'true')
