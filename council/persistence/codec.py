"""Bounded record serialization.

Records are stored as pydantic JSON bytes. ``encode_record`` is the single
pre-write check of the size bound: stores call it before touching storage,
so an oversized record never produces a partial write.
"""

from typing import Optional, TypeVar

import logfire
from pydantic import ValidationError

from council.domain.model.common import DomainModel
from council.persistence.error import CorruptRecordError, RecordTooLargeError

R = TypeVar("R", bound=DomainModel)


def encode_record(key: int, record: DomainModel, max_size: int) -> bytes:
    """Serialize a record and enforce the store's size bound.

    Args:
        key: Key the record is written under (for error reporting)
        record: Record to serialize
        max_size: Maximum number of bytes allowed

    Returns:
        Serialized record

    Raises:
        RecordTooLargeError: If the serialized form exceeds ``max_size``
    """
    data = record.model_dump_json(by_alias=True).encode("utf-8")
    if len(data) > max_size:
        raise RecordTooLargeError(key, len(data), max_size)
    return data


def decode_record(key: int, data: bytes, model: type[R]) -> R:
    """Deserialize stored bytes into a fresh record instance.

    Raises:
        CorruptRecordError: If the bytes do not decode into ``model``
    """
    try:
        return model.model_validate_json(data)
    except ValidationError as e:
        raise CorruptRecordError(key, str(e)) from e


def decode_replaced(key: int, data: bytes, model: type[R]) -> Optional[R]:
    """Decode the record an overwrite is about to replace.

    Unreadable bytes do not block the overwrite. They are logged and
    reported as no previous record.
    """
    try:
        return decode_record(key, data, model)
    except CorruptRecordError as e:
        logfire.warn("Overwriting unreadable record", key=key, reason=str(e))
        return None
