"""Coverage Bounded Context - Value Objects.

Immutable data structures describing measured radio signal quality.
Type validation occurs at construction time via Pydantic; raw values are
NOT range-checked because they come straight from the modem.

GSM reference values:
- ASU (signal strength): 0-31, 99 = unknown (3GPP TS 27.007 Sec 8.5)
- Bit error rate: 0-7, 99 = unknown (3GPP TS 27.007 Sec 8.5)
- Timing advance: 0-219 symbol periods (3GPP TS 45.010 Sec 5.8)
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, field_validator

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
# Out-of-band marker for "absent" on the wire (max signed 32-bit integer)
UNAVAILABLE = 2**31 - 1

# ASU reported by the modem when signal strength is unknown
ASU_UNKNOWN = 99

# Level thresholds in ASU (lower bound, inclusive)
GSM_SIGNAL_STRENGTH_GREAT = 12
GSM_SIGNAL_STRENGTH_GOOD = 8
GSM_SIGNAL_STRENGTH_MODERATE = 5

# Highest ASU still shown as zero bars
GSM_SIGNAL_STRENGTH_NONE_MAX = 2

# dBm = GSM_DBM_OFFSET + GSM_DBM_PER_ASU * asu
GSM_DBM_OFFSET = -113
GSM_DBM_PER_ASU = 2


class SignalLevel(IntEnum):
    """Human-facing signal "bars", ordered from worst to best."""

    NONE_OR_UNKNOWN = 0
    POOR = 1
    MODERATE = 2
    GOOD = 3
    GREAT = 4


# ---------------------------------------------------------------------------
# Scalar classifier
# ---------------------------------------------------------------------------
def asu_to_level(asu: int | None) -> SignalLevel:
    """Map a GSM ASU value to a SignalLevel.

    asu = 0 (-113 dBm or less) is very weak, so anything at or below
    GSM_SIGNAL_STRENGTH_NONE_MAX is shown as no signal. 99, None and the
    UNAVAILABLE marker are unknown.
    Values outside 0-31 are not clamped; they fall through the same thresholds.
    """
    if asu is None or asu == UNAVAILABLE:
        return SignalLevel.NONE_OR_UNKNOWN
    if asu <= GSM_SIGNAL_STRENGTH_NONE_MAX or asu == ASU_UNKNOWN:
        return SignalLevel.NONE_OR_UNKNOWN
    if asu >= GSM_SIGNAL_STRENGTH_GREAT:
        return SignalLevel.GREAT
    if asu >= GSM_SIGNAL_STRENGTH_GOOD:
        return SignalLevel.GOOD
    if asu >= GSM_SIGNAL_STRENGTH_MODERATE:
        return SignalLevel.MODERATE
    return SignalLevel.POOR


def asu_to_dbm(asu: int | None) -> int | None:
    """Convert a GSM ASU value to dBm.

    Returns None when asu is 99, None or UNAVAILABLE. Out-of-range values
    are converted with the same linear formula (e.g. 150 -> 187).
    """
    if asu is None or asu == ASU_UNKNOWN or asu == UNAVAILABLE:
        return None
    return GSM_DBM_OFFSET + GSM_DBM_PER_ASU * asu


# ---------------------------------------------------------------------------
# SignalMeasurement
# ---------------------------------------------------------------------------
class SignalMeasurement(BaseModel):
    """GSM signal strength measurement (Value Object).

    Holds three raw integers exactly as reported by the radio layer. Any of
    them may be None ("absent"). The wire marker UNAVAILABLE is accepted as
    input and normalized to None so "absent" has a single representation.

    Invariants:
        GS-1: Fields are int or None; no range checks
        GS-2: Equality and hash cover all three fields
        GS-3: Classification depends on signal_strength only

    Note on __eq__ and __hash__: Pydantic frozen models compare by value
    automatically and return NotImplemented (so ``==`` is False) for
    non-model operands.
    """

    signal_strength: int | None = None  # ASU, 0-31 or 99
    bit_error_rate: int | None = None  # 0-7 or 99
    timing_advance: int | None = None  # 0-219 symbol periods

    model_config = ConfigDict(frozen=True, strict=True)

    @field_validator(
        "signal_strength", "bit_error_rate", "timing_advance", mode="before"
    )
    @classmethod
    def normalize_unavailable(cls, value: object) -> object:
        """Map the wire marker for "absent" to None."""
        if isinstance(value, int) and value == UNAVAILABLE:
            return None
        return value

    # -- construction -----------------------------------------------------
    @classmethod
    def default(cls) -> "SignalMeasurement":
        """Return a record with every field absent."""
        return cls()

    @classmethod
    def from_raw(
        cls,
        signal_strength: int | None,
        bit_error_rate: int | None,
        timing_advance: int | None = None,
    ) -> "SignalMeasurement":
        """Build a record from modem values, stored verbatim."""
        return cls(
            signal_strength=signal_strength,
            bit_error_rate=bit_error_rate,
            timing_advance=timing_advance,
        )

    def copy_from(self, other: "SignalMeasurement") -> None:
        """Overwrite this record's fields with those of ``other``.

        Only call this on an instance nobody else holds yet. Once a record
        has been shared (or hashed into a set/dict) it must not change.
        """
        for name in type(self).model_fields:
            object.__setattr__(self, name, getattr(other, name))

    def set_default_values(self) -> None:
        """Reset every field to absent in place (same caveat as copy_from)."""
        for name in type(self).model_fields:
            object.__setattr__(self, name, None)

    def clone(self) -> "SignalMeasurement":
        """Return a new record with the same field values."""
        return self.model_copy()

    def copy(self) -> "SignalMeasurement":  # type: ignore[override]
        """CellSignalStrength port alias for clone()."""
        return self.clone()

    # -- classification ---------------------------------------------------
    def level(self) -> SignalLevel:
        """Return the 0-4 signal level derived from signal_strength."""
        return asu_to_level(self.signal_strength)

    def asu_level(self) -> int | None:
        """Return signal_strength unchanged (99 still means unknown)."""
        return self.signal_strength

    def dbm(self) -> int | None:
        """Return signal power in dBm, or None if unknown."""
        return asu_to_dbm(self.signal_strength)

    def __str__(self) -> str:
        return (
            "SignalMeasurement:"
            f" ss={_wire_value(self.signal_strength)}"
            f" ber={_wire_value(self.bit_error_rate)}"
            f" mTa={_wire_value(self.timing_advance)}"
        )


def _wire_value(value: int | None) -> int:
    """Return the wire representation of a field (UNAVAILABLE for None)."""
    return UNAVAILABLE if value is None else value
