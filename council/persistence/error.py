"""Persistence layer errors.

These signal a broken storage contract rather than a business rule. They
abort the current call; nothing is written.
"""


class PersistenceError(Exception):
    """Base persistence error."""

    code: str = "PersistenceError"


class RecordTooLargeError(PersistenceError):
    """Raised when a serialized record exceeds its store's size bound."""

    code = "RecordTooLarge"

    def __init__(self, key: int, size: int, max_size: int):
        self.key = key
        self.size = size
        self.max_size = max_size
        super().__init__(
            f"Record {key} serializes to {size} bytes (limit {max_size})"
        )


class CorruptRecordError(PersistenceError):
    """Raised when stored bytes cannot be decoded back into a record."""

    code = "CorruptRecord"

    def __init__(self, key: int, reason: str):
        self.key = key
        super().__init__(f"Stored record {key} is unreadable: {reason}")


class SequenceCorruptedError(PersistenceError):
    """Raised when a sequence counter holds an invalid value or is exhausted."""

    code = "SequenceCorrupted"

    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(f"Sequence {name!r} holds invalid value {value!r}")
