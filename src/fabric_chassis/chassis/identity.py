"""
Chassis identity resolution.

Vendors other than Voltaire are grouped by a shared system image GUID instead
of a topology walk. Some vendors encode a slot or location byte into that GUID,
which must be ignored when comparing chassis.

Strategies
1. Topspin and InfiniCon: mask off byte 4 (bits 24..31), the slot byte.
2. Xsigo: switches mask the slot byte, other non adapter nodes keep the full
   GUID. Channel adapters borrow the chassis identity from the leaf in position
   one if they are attached to it, because only that leaf externalizes it.
3. Everyone else: the system image GUID as is.

resolve_chassis_guid is pure and returns the same value for the same graph.
"""

from __future__ import annotations

from fabric_chassis.chassis.classify import (
    SLOT_BYTE_MASK,
    SS_VENDOR_ID,
    TS_VENDOR_ID,
    XS_VENDOR_ID,
    is_xsigo_ca,
    is_xsigo_guid,
    is_xsigo_leafone,
    is_xsigo_switch,
)
from fabric_chassis.core.types import Node


def topspin_chassis_guid(sysimgguid: int) -> int:
    """Byte 3 is the chassis type and byte 4 the slot, so mask byte 4 only."""
    return sysimgguid & SLOT_BYTE_MASK


def xsigo_chassis_guid(node: Node) -> int:
    """
    Resolve the chassis GUID of an Xsigo node.

    Byte 3 is the node type and byte 4 the port type.
    Returns 0 for an adapter without a discovered port 1.
    """
    sysimgguid = node.system_image_guid

    if not is_xsigo_ca(sysimgguid):
        if is_xsigo_switch(sysimgguid):
            return sysimgguid & SLOT_BYTE_MASK
        return sysimgguid

    port = node.port(1)
    if port is None:
        return 0

    remote = port.remote_node
    if remote is None:
        return sysimgguid

    if is_xsigo_leafone(remote.system_image_guid):
        return remote.system_image_guid & SLOT_BYTE_MASK
    return sysimgguid


def resolve_chassis_guid(node: Node) -> int:
    """Return the value nodes of the same chassis share."""
    if node.vendor_id in {TS_VENDOR_ID, SS_VENDOR_ID}:
        return topspin_chassis_guid(node.system_image_guid)
    if node.vendor_id == XS_VENDOR_ID or is_xsigo_guid(node.system_image_guid):
        return xsigo_chassis_guid(node)
    return node.system_image_guid
