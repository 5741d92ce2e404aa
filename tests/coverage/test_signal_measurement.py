"""Tests for the SignalMeasurement value object and scalar classifier.

Records are built directly from raw integers; no codec or I/O is involved.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from domain.coverage.ports import CellSignalStrength
from domain.coverage.value_objects import (
    UNAVAILABLE,
    SignalLevel,
    SignalMeasurement,
    asu_to_dbm,
    asu_to_level,
)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------
def test_default_has_all_fields_absent():
    record = SignalMeasurement.default()

    assert record.signal_strength is None
    assert record.bit_error_rate is None
    assert record.timing_advance is None
    assert record == SignalMeasurement()


def test_default_level_is_none_or_unknown():
    assert SignalMeasurement.default().level() is SignalLevel.NONE_OR_UNKNOWN


def test_from_raw_stores_values_verbatim():
    record = SignalMeasurement.from_raw(17, 3, 42)

    assert record.signal_strength == 17
    assert record.bit_error_rate == 3
    assert record.timing_advance == 42


def test_from_raw_timing_advance_defaults_to_absent():
    record = SignalMeasurement.from_raw(17, 3)
    assert record.timing_advance is None


@pytest.mark.parametrize("ss", [-5, 32, 150])
def test_from_raw_accepts_out_of_range_values(ss):
    record = SignalMeasurement.from_raw(ss, 0)
    assert record.signal_strength == ss


def test_unavailable_marker_is_normalized_to_none():
    record = SignalMeasurement.from_raw(UNAVAILABLE, UNAVAILABLE, UNAVAILABLE)

    assert record.signal_strength is None
    assert record.bit_error_rate is None
    assert record.timing_advance is None
    assert record == SignalMeasurement.default()


def test_non_integer_field_rejected():
    with pytest.raises(ValidationError):
        SignalMeasurement(signal_strength="12")


def test_record_is_frozen():
    record = SignalMeasurement.from_raw(10, 0, 5)
    with pytest.raises(ValidationError):
        record.signal_strength = 11


# ---------------------------------------------------------------------------
# copy_from / clone
# ---------------------------------------------------------------------------
def test_copy_from_overwrites_all_fields():
    target = SignalMeasurement.default()
    source = SignalMeasurement.from_raw(20, 1, 63)

    target.copy_from(source)

    assert target == source
    assert target is not source


def test_clone_is_equal_but_not_identical():
    record = SignalMeasurement.from_raw(20, 1, 63)
    clone = record.clone()

    assert clone == record
    assert clone is not record


def test_mutating_clone_does_not_affect_original():
    record = SignalMeasurement.from_raw(20, 1, 63)
    clone = record.clone()

    clone.copy_from(SignalMeasurement.from_raw(4, 7, 0))

    assert record == SignalMeasurement.from_raw(20, 1, 63)
    assert clone != record


def test_copy_matches_clone():
    record = SignalMeasurement.from_raw(9, 2)
    assert record.copy() == record.clone()


def test_satisfies_cell_signal_strength_port():
    record = SignalMeasurement.from_raw(10, 0)

    assert isinstance(record, CellSignalStrength)
    assert (record.level(), record.dbm(), record.asu_level()) == (
        SignalLevel.GOOD,
        -93,
        10,
    )


def test_object_missing_clone_is_not_cell_signal_strength():
    class LevelOnly:
        def level(self):
            return SignalLevel.POOR

    assert not isinstance(LevelOnly(), CellSignalStrength)


def test_set_default_values_resets_in_place():
    record = SignalMeasurement.from_raw(20, 1, 63)

    record.set_default_values()

    assert record == SignalMeasurement.default()
    assert record.level() is SignalLevel.NONE_OR_UNKNOWN


# ---------------------------------------------------------------------------
# Level classification
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(
    "asu, expected",
    [
        (0, SignalLevel.NONE_OR_UNKNOWN),
        (2, SignalLevel.NONE_OR_UNKNOWN),
        (3, SignalLevel.POOR),
        (4, SignalLevel.POOR),
        (5, SignalLevel.MODERATE),
        (7, SignalLevel.MODERATE),
        (8, SignalLevel.GOOD),
        (11, SignalLevel.GOOD),
        (12, SignalLevel.GREAT),
        (31, SignalLevel.GREAT),
        (99, SignalLevel.NONE_OR_UNKNOWN),
        (None, SignalLevel.NONE_OR_UNKNOWN),
    ],
)
def test_level_boundaries(asu, expected):
    assert SignalMeasurement(signal_strength=asu).level() is expected


def test_level_covers_whole_asu_range():
    for asu in range(0, 100):
        level = asu_to_level(asu)
        if asu <= 2 or asu == 99:
            assert level is SignalLevel.NONE_OR_UNKNOWN
        elif asu >= 12:
            assert level is SignalLevel.GREAT
        elif asu >= 8:
            assert level is SignalLevel.GOOD
        elif asu >= 5:
            assert level is SignalLevel.MODERATE
        else:
            assert level is SignalLevel.POOR


def test_level_ignores_bit_error_rate_and_timing_advance():
    assert (
        SignalMeasurement.from_raw(10, 0, 0).level()
        == SignalMeasurement.from_raw(10, 7, 219).level()
    )


def test_negative_asu_is_none_or_unknown():
    assert asu_to_level(-1) is SignalLevel.NONE_OR_UNKNOWN


# ---------------------------------------------------------------------------
# dBm / ASU
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(
    "asu, expected",
    [(0, -113), (10, -93), (31, -51), (99, None), (None, None)],
)
def test_dbm(asu, expected):
    assert SignalMeasurement(signal_strength=asu).dbm() == expected


def test_dbm_not_clamped_for_out_of_range_asu():
    assert asu_to_dbm(150) == 187
    assert asu_to_dbm(-1) == -115


def test_unavailable_marker_is_unknown_for_scalar_classifier():
    assert asu_to_level(UNAVAILABLE) is SignalLevel.NONE_OR_UNKNOWN
    assert asu_to_dbm(UNAVAILABLE) is None


@pytest.mark.parametrize("asu", [0, 15, 31, 99, 150, None])
def test_asu_level_is_passthrough(asu):
    assert SignalMeasurement(signal_strength=asu).asu_level() == asu


def test_timing_advance_is_raw():
    assert SignalMeasurement.from_raw(10, 0, 219).timing_advance == 219


# ---------------------------------------------------------------------------
# Equality, hashing, formatting
# ---------------------------------------------------------------------------
def test_equality_is_reflexive_symmetric_transitive():
    a = SignalMeasurement.from_raw(14, 2, 30)
    b = SignalMeasurement.from_raw(14, 2, 30)
    c = SignalMeasurement.from_raw(14, 2, 30)

    assert a == a
    assert a == b and b == a
    assert a == b and b == c and a == c


@pytest.mark.parametrize(
    "other",
    [
        SignalMeasurement.from_raw(15, 2, 30),
        SignalMeasurement.from_raw(14, 3, 30),
        SignalMeasurement.from_raw(14, 2, 31),
        SignalMeasurement.from_raw(14, 2),
    ],
)
def test_records_differ_when_any_field_differs(other):
    assert SignalMeasurement.from_raw(14, 2, 30) != other


@pytest.mark.parametrize("other", [None, 14, "SignalMeasurement", (14, 2, 30)])
def test_equality_with_other_types_is_false(other):
    record = SignalMeasurement.from_raw(14, 2, 30)

    assert (record == other) is False
    assert record != other


def test_equal_records_hash_equal():
    a = SignalMeasurement.from_raw(14, 2, 30)
    b = SignalMeasurement.from_raw(14, 2, 30)

    assert hash(a) == hash(b)
    assert len({a, b}) == 1


def test_str_format():
    record = SignalMeasurement.from_raw(14, 2, 30)
    assert str(record) == "SignalMeasurement: ss=14 ber=2 mTa=30"


def test_str_prints_absent_as_wire_marker():
    assert str(SignalMeasurement.default()) == (
        "SignalMeasurement: ss=2147483647 ber=2147483647 mTa=2147483647"
    )
