"""File operation utilities for the token top-up report application."""
import logging
from contextlib import contextmanager

import config

# Get loggers
logger = logging.getLogger('debug')

SENSITIVE_KEYS = ('email',)


def read_file_bytes(file_path):
    """Read the raw content of a file.

    Args:
        file_path: Path to the file to read

    Returns:
        bytes: The file content

    Raises:
        OSError: If the file cannot be opened or read
    """
    with open(file_path, 'rb') as f:
        content = f.read()
    logger.debug(f"Read {len(content)} bytes from {file_path}")
    return content


@contextmanager
def open_report_file(file_path):
    """Open the report destination for writing and always close it.

    Args:
        file_path: Path of the report file

    Yields:
        A text file handle using the report encoding and "\\n" line endings
    """
    handle = open(file_path, 'w', encoding=config.REPORT_ENCODING, newline='\n')
    try:
        yield handle
    finally:
        handle.close()
        logger.debug(f"Closed report file: {file_path}")


def mask_email(value):
    """Mask the local part of an email address, keeping its first character."""
    local, sep, domain = value.partition('@')
    if not sep or not local:
        return '*' * len(value)
    return f"{local[0]}{'*' * (len(local) - 1)}@{domain}"


def sanitize_data_for_logging(data):
    """Create a copy of data with sensitive information masked for safe logging.

    Args:
        data: Data structure to sanitize

    Returns:
        Data structure with sensitive information masked
    """
    if data is None:
        return None

    # For primitive types, return as is
    if not isinstance(data, (dict, list)):
        return data

    # For lists, sanitize each element
    if isinstance(data, list):
        return [sanitize_data_for_logging(item) for item in data]

    # For dictionaries, sanitize each value
    sanitized = {}
    for key, value in data.items():
        if key in SENSITIVE_KEYS and isinstance(value, str):
            sanitized[key] = mask_email(value)
        elif isinstance(value, (dict, list)):
            sanitized[key] = sanitize_data_for_logging(value)
        else:
            sanitized[key] = value

    return sanitized
