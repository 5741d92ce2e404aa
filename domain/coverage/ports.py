"""Domain Port(s) for cell signal strength.

Defines the capability every per-technology signal strength record exposes.
Only GSM is implemented in this package.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from .value_objects import SignalLevel

_T = TypeVar("_T", bound="CellSignalStrength")


@runtime_checkable
class CellSignalStrength(Protocol):
    """Port for reading signal quality from a radio-specific record."""

    def level(self) -> SignalLevel:
        """Return the 0-4 "bars" level."""
        ...

    def dbm(self) -> int | None:
        """Return signal power in dBm, or None if unknown."""
        ...

    def asu_level(self) -> int | None:
        """Return the raw ASU value (99 means unknown)."""
        ...

    def clone(self: _T) -> _T:
        """Return an independent record with the same values."""
        ...

    def copy(self: _T) -> _T:
        """Alias for clone()."""
        ...
