"""Infrastructure adapters for the coverage bounded context.

This module provides the wire codec used to move GSM signal strength
records across a process boundary.
"""

from .parcel_codec import ParcelCodec

__all__ = ["ParcelCodec"]
