"""
Error taxonomy.

We separate error types so callers can react correctly.
Example:
ChassisInvariantError means the wiring tables or classification logic do not
match the hardware. Grouping stops, there is no partial result to keep.
FabricLoadError means the discovery input itself is malformed.

Tolerated conditions, such as a missing remote link or a neighbor that was
never placed, are not errors and never raise.
"""

from __future__ import annotations


class ChassisError(Exception):
    """Base class for all chassis grouping exceptions."""


class ChassisInvariantError(ChassisError):
    """
    Raised when an internal invariant of the grouping engine is violated.

    guid identifies the node that triggered the failure.
    """

    def __init__(self, message: str, guid: int) -> None:
        super().__init__(f"{message}: guid 0x{guid:016x}")
        self.guid = guid


class UnknownHardwareModel(ChassisInvariantError):
    """Raised when a slot lookup runs against an unrecognized fabric board generation."""


class SlotIndexOutOfRange(ChassisInvariantError):
    """Raised when a computed chassis slot index falls outside the slot array."""


class FabricLoadError(ChassisError):
    """Raised when a discovered fabric description cannot be loaded."""
