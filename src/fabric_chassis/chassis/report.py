"""
Reporting queries.

Read only helpers used by the formatting layer. They never change the fabric.

Labels are only reported for Voltaire modules that were placed in a chassis.
Everything else returns None, meaning not applicable.
"""

from __future__ import annotations

from typing import Dict, Optional

from fabric_chassis.chassis.classify import VTR_VENDOR_ID
from fabric_chassis.core.types import ChassisType, Node, SlotKind
from fabric_chassis.discovery.fabric import Fabric

CHASSIS_TYPE_LABELS: Dict[ChassisType, str] = {
    ChassisType.isr9288: "ISR9288",
    ChassisType.isr9096: "ISR9096",
    ChassisType.isr2012: "ISR2012",
    ChassisType.isr2004: "ISR2004",
}

SLOT_KIND_LABELS: Dict[SlotKind, str] = {
    SlotKind.line: "Line",
    SlotKind.spine: "Spine",
    SlotKind.srbd: "SRBD",
}


def chassis_type_label(node: Node) -> Optional[str]:
    """Return the chassis model label of a node, or None."""
    if node.vendor_id != VTR_VENDOR_ID or node.chassis is None:
        return None
    return CHASSIS_TYPE_LABELS.get(node.chassis_type)


def chassis_slot_str(node: Node) -> Optional[str]:
    """
    Return a slot description such as "Line 3 Chip 1", or None.
    """
    if node.vendor_id != VTR_VENDOR_ID or node.chassis is None:
        return None
    label = SLOT_KIND_LABELS.get(node.slot_kind)
    if label is None:
        return None
    return f"{label} {node.slot_number} Chip {node.subchip_number}"


def get_chassis_guid(fabric: Fabric, chassis_number: int) -> int:
    """Return the GUID of the chassis with this number, or 0 if unknown."""
    chassis = fabric.find_chassis_by_number(chassis_number)
    if chassis is None:
        return 0
    return chassis.guid
