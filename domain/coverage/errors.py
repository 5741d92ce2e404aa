"""Coverage Bounded Context - Error Hierarchy.

Custom exceptions for signal strength records and their wire format.
"""

from __future__ import annotations


class CoverageError(Exception):
    """Base error for coverage operations."""


class CodecError(CoverageError):
    """Signal strength record could not be encoded or decoded."""


class TruncatedInputError(CodecError):
    """Fewer bytes available than a full record needs.

    Attributes:
        expected: Bytes required for one record
        actual: Bytes actually available
    """

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Truncated input: need {expected} bytes, got {actual}"
        )


class FieldOverflowError(CodecError):
    """Field value does not fit in a signed 32-bit wire slot.

    Attributes:
        field: Name of the offending field
        value: The value that could not be encoded
    """

    def __init__(self, field: str, value: int) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Field {field}={value} does not fit in int32")


class AsuOverflowError(CoverageError):
    """ASU value does not fit in the int64 arrays used for batch work.

    Attributes:
        value: The offending signal_strength
    """

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"signal_strength={value} does not fit in int64")
