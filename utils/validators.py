"""Schema validation utilities for the users and companies files."""
import logging
from functools import lru_cache
from typing import Any, List, Type, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from models.exceptions import SchemaViolationError

logger = logging.getLogger('debug')

RecordT = TypeVar('RecordT', bound=BaseModel)


@lru_cache(maxsize=None)
def get_list_adapter(record_model):
    """Create and cache a list validator for a record model."""
    return TypeAdapter(List[record_model])


def format_location(loc) -> str:
    """Render a pydantic error location as ``[2].email``."""
    parts = []
    for item in loc:
        if isinstance(item, int):
            parts.append(f"[{item}]")
        elif parts:
            parts.append(f".{item}")
        else:
            parts.append(str(item))
    return "".join(parts)


def validate_records(data: Any, record_model: Type[RecordT]) -> List[RecordT]:
    """Validate parsed JSON data against a record schema.

    The top-level value must be a list of objects, each matching
    ``record_model``. Only the first violation is reported.

    Args:
        data: Parsed JSON data
        record_model: Pydantic model describing a single record

    Returns:
        list: The validated records, in input order

    Raises:
        SchemaViolationError: If the data does not match the schema
    """
    try:
        records = get_list_adapter(record_model).validate_python(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = format_location(first['loc'])
        logger.debug(f"{record_model.__name__} validation failed with {e.error_count()} error(s)")
        raise SchemaViolationError(location, first['msg']) from e

    logger.debug(f"Validated {len(records)} {record_model.__name__} entries")
    return records
