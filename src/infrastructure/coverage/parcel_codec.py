"""Binary parcel codec for SignalMeasurement.

Serializes a record for transport across a process boundary. The framing
envelope (type tags, arrays of records) belongs to the transport and is not
handled here; this adapter only reads and writes the record body.

Wire layout (12 bytes, no version, no checksum):
    offset 0: int32 signal_strength
    offset 4: int32 bit_error_rate
    offset 8: int32 timing_advance

Absent fields travel as UNAVAILABLE (2**31 - 1) and come back as None.
Byte order defaults to the host's native order.
"""

from __future__ import annotations

import logging
import struct
from typing import BinaryIO

from domain.coverage.errors import FieldOverflowError, TruncatedInputError
from domain.coverage.value_objects import UNAVAILABLE, SignalMeasurement

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

# Field order on the wire
_FIELDS = ("signal_strength", "bit_error_rate", "timing_advance")

# struct prefixes: "=" is native order with standard (4-byte) int size
_BYTE_ORDERS = {"native": "=", "little": "<", "big": ">"}


class ParcelCodec:
    """Infrastructure adapter encoding SignalMeasurement as three int32s.

    Parameters
    ----------
    byte_order: str
        One of "native", "little" or "big". Both ends of a transport must
        agree; "native" matches an in-host IPC peer.
    """

    def __init__(self, byte_order: str = "native") -> None:
        if byte_order not in _BYTE_ORDERS:
            raise ValueError(
                f"byte_order must be one of {sorted(_BYTE_ORDERS)}, got {byte_order!r}"
            )
        self.byte_order = byte_order
        self._struct = struct.Struct(_BYTE_ORDERS[byte_order] + "iii")

    @property
    def size(self) -> int:
        """Encoded size of one record in bytes."""
        return self._struct.size

    def encode(self, record: SignalMeasurement) -> bytes:
        """Encode a record into its 12-byte wire form.

        Raises:
            FieldOverflowError: If a field does not fit in int32
        """
        values = []
        for name in _FIELDS:
            value = getattr(record, name)
            if value is None:
                value = UNAVAILABLE
            elif not (_INT32_MIN <= value <= _INT32_MAX):
                raise FieldOverflowError(name, value)
            values.append(value)

        logger.debug("Encoding %s", record)
        return self._struct.pack(*values)

    def decode(self, data: bytes | bytearray | memoryview) -> SignalMeasurement:
        """Decode a record from the first 12 bytes of ``data``.

        Trailing bytes are ignored.

        Raises:
            TruncatedInputError: If fewer than 12 bytes are available
        """
        if len(data) < self.size:
            logger.warning(
                "Cannot decode SignalMeasurement: %d of %d bytes available",
                len(data),
                self.size,
            )
            raise TruncatedInputError(self.size, len(data))

        ss, ber, ta = self._struct.unpack_from(data, 0)
        record = SignalMeasurement.from_raw(ss, ber, ta)
        logger.debug("Decoded %s", record)
        return record

    def write(self, record: SignalMeasurement, writer: BinaryIO) -> None:
        """Write one encoded record to a binary stream."""
        writer.write(self.encode(record))

    def read(self, reader: BinaryIO) -> SignalMeasurement:
        """Read exactly one record from a binary stream.

        Raises:
            TruncatedInputError: If the stream ends before 12 bytes are read
        """
        return self.decode(reader.read(self.size))
