"""Input file loading for the token top-up report application."""
import os
import json
import logging
from typing import Any, List, Type

from models.exceptions import (
    NotFoundError,
    ParseFailureError,
    ReadFailureError,
    SchemaViolationError,
)
from models.schemas import CompanyRecord, UserRecord
from utils.file_operations import read_file_bytes, sanitize_data_for_logging
from utils.validators import validate_records

# Get loggers
app_logger = logging.getLogger('app')
debug_logger = logging.getLogger('debug')


def _read_json_file(file_path: str) -> Any:
    """Read and parse a JSON file.

    Args:
        file_path: Path to the JSON file

    Returns:
        The parsed JSON value

    Raises:
        NotFoundError: If the path does not exist or is not a file
        ReadFailureError: If the file cannot be read
        ParseFailureError: If the content is not valid JSON
    """
    if not os.path.isfile(file_path):
        raise NotFoundError(file_path)

    debug_logger.debug(f"Reading file content: {file_path}")
    try:
        content = read_file_bytes(file_path)
    except OSError as e:
        raise ReadFailureError(file_path, str(e)) from e

    try:
        return json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseFailureError(file_path, str(e)) from e


def load_records(file_path: str, record_model: Type) -> List:
    """Load a JSON file and validate it against a record schema.

    Any failure is terminal for the file; nothing is retried.

    Args:
        file_path: Path to the JSON file
        record_model: Pydantic model describing a single record

    Returns:
        list: The validated records, in file order

    Raises:
        LoadError: One of NotFoundError, ReadFailureError, ParseFailureError
            or SchemaViolationError
    """
    data = _read_json_file(file_path)

    if debug_logger.isEnabledFor(logging.DEBUG):
        debug_logger.debug(f"Processing data from {file_path}: {sanitize_data_for_logging(data)}")

    try:
        records = validate_records(data, record_model)
    except SchemaViolationError as e:
        raise e.with_path(file_path) from e

    app_logger.info(f"Loaded {len(records)} records from {os.path.basename(file_path)}")
    return records


def load_users(file_path: str) -> List[UserRecord]:
    """Load and validate the users file."""
    return load_records(file_path, UserRecord)


def load_companies(file_path: str) -> List[CompanyRecord]:
    """Load and validate the companies file."""
    return load_records(file_path, CompanyRecord)
