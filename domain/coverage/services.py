"""Coverage Bounded Context - Domain Services.

Pure domain logic for classifying many GSM readings at once (e.g. a drive
test log). NO I/O operations - decoding records from the wire is implemented
by infrastructure adapters under `src/infrastructure/coverage/`.

The scalar rules live in `domain.coverage.value_objects`; the functions here
must agree with them element-wise.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from domain.coverage.errors import AsuOverflowError
from domain.coverage.value_objects import (
    ASU_UNKNOWN,
    GSM_DBM_OFFSET,
    GSM_DBM_PER_ASU,
    GSM_SIGNAL_STRENGTH_GOOD,
    GSM_SIGNAL_STRENGTH_GREAT,
    GSM_SIGNAL_STRENGTH_MODERATE,
    GSM_SIGNAL_STRENGTH_NONE_MAX,
    UNAVAILABLE,
    SignalLevel,
    SignalMeasurement,
    asu_to_level,
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


# ---------------------------------------------------------------------------
# Helper: ASU extraction
# ---------------------------------------------------------------------------
def asu_array(records: Iterable[SignalMeasurement]) -> NDArray[np.int64]:
    """Collect signal_strength from records, absent values as UNAVAILABLE.

    Raises:
        AsuOverflowError: If a signal_strength does not fit in int64
    """
    values = []
    for r in records:
        asu = UNAVAILABLE if r.signal_strength is None else r.signal_strength
        if not (_INT64_MIN <= asu <= _INT64_MAX):
            raise AsuOverflowError(asu)
        values.append(asu)
    return np.array(values, dtype=np.int64)


def _as_int64(asu: ArrayLike) -> NDArray[np.int64]:
    """Convert ASU input to int64, rejecting non-integer dtypes.

    Floats are refused rather than truncated (4.9 must not become 4).
    """
    a = np.asarray(asu)
    if a.size and not np.issubdtype(a.dtype, np.integer):
        raise TypeError(f"ASU values must be integers, got dtype {a.dtype}")
    return a.astype(np.int64)


# ---------------------------------------------------------------------------
# Vectorized Level Classification
# ---------------------------------------------------------------------------
def levels_for_asu(asu: ArrayLike) -> NDArray[np.int8]:
    """Map an array of ASU values to SignalLevel codes.

    Args:
        asu: Integer ASU values of any shape. Absent values must be UNAVAILABLE.

    Raises:
        TypeError: If asu has a non-integer dtype

    Returns:
        int8 array of the same shape holding SignalLevel values (0-4)
    """
    a = _as_int64(asu)

    # np.select picks the first matching condition, same order as asu_to_level
    conditions = [
        (a <= GSM_SIGNAL_STRENGTH_NONE_MAX) | (a == ASU_UNKNOWN) | (a == UNAVAILABLE),
        a >= GSM_SIGNAL_STRENGTH_GREAT,
        a >= GSM_SIGNAL_STRENGTH_GOOD,
        a >= GSM_SIGNAL_STRENGTH_MODERATE,
    ]
    choices = [
        int(SignalLevel.NONE_OR_UNKNOWN),
        int(SignalLevel.GREAT),
        int(SignalLevel.GOOD),
        int(SignalLevel.MODERATE),
    ]
    return np.select(conditions, choices, default=int(SignalLevel.POOR)).astype(
        np.int8
    )


# ---------------------------------------------------------------------------
# Vectorized dBm Conversion
# ---------------------------------------------------------------------------
def dbm_for_asu(asu: ArrayLike) -> NDArray[np.float64]:
    """Convert an array of ASU values to dBm.

    Unknown entries (99 or UNAVAILABLE) become NaN, so the result is float64.
    """
    a = _as_int64(asu)
    unknown = (a == ASU_UNKNOWN) | (a == UNAVAILABLE)
    dbm = (GSM_DBM_OFFSET + GSM_DBM_PER_ASU * a).astype(np.float64)
    dbm[unknown] = np.nan
    return dbm


# ---------------------------------------------------------------------------
# Summary: level histogram
# ---------------------------------------------------------------------------
def level_histogram(records: Iterable[SignalMeasurement]) -> dict[SignalLevel, int]:
    """Count records per SignalLevel (every level present, possibly 0).

    Example:
        >>> readings = [SignalMeasurement.from_raw(15, 0), SignalMeasurement()]
        >>> level_histogram(readings)[SignalLevel.GREAT]
        1
    """
    # Scalar classifier, so ASU values beyond int64 are still counted
    levels = np.array(
        [asu_to_level(r.signal_strength) for r in records], dtype=np.intp
    )
    counts = np.bincount(levels, minlength=len(SignalLevel))
    return {level: int(counts[level]) for level in SignalLevel}
