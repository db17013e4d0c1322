from __future__ import annotations

from typing import Any, Optional

from fabric_chassis.chassis.report import chassis_slot_str, chassis_type_label
from fabric_chassis.core.types import Chassis, Node
from fabric_chassis.discovery.fabric import Fabric


def _hex(guid: int) -> str:
    return f"0x{guid:016x}"


def _guid_or_none(node: Optional[Node]) -> Optional[str]:
    if node is None:
        return None
    return _hex(node.guid)


def chassis_to_json_safe_dict(chassis: Chassis) -> dict[str, Any]:
    """
    Convert a Chassis into a JSON safe dict.

    Nodes are referenced by GUID only, the node graph is cyclic.
    """
    return {
        "number": chassis.number,
        "guid": _hex(chassis.guid),
        "node_count": chassis.node_count,
        "line_slots": {str(i): _hex(n.guid) for i, n in chassis.occupied_lines().items()},
        "spine_slots": {str(i): _hex(n.guid) for i, n in chassis.occupied_spines().items()},
        "nodes": [_hex(n.guid) for n in chassis.nodes],
    }


def node_to_json_safe_dict(node: Node) -> dict[str, Any]:
    chassis_number = node.chassis.number if node.chassis is not None else 0
    return {
        "guid": _hex(node.guid),
        "vendor_id": node.vendor_id,
        "device_id": node.device_id,
        "node_type": node.node_type.name,
        "chassis": chassis_number,
        "chassis_type": chassis_type_label(node),
        "slot": chassis_slot_str(node),
        "slot_kind": node.slot_kind.name,
        "slot_number": node.slot_number,
        "subchip_number": node.subchip_number,
        "ports": [
            {
                "port": p.portnum,
                "ext_port": p.ext_portnum,
                "remote": _guid_or_none(p.remote_node),
                "remote_port": p.remote.portnum if p.remote is not None else None,
            }
            for p in node.iter_ports()
        ],
    }


def fabric_chassis_to_json(fabric: Fabric) -> dict[str, Any]:
    """
    Grouping result transport shape.

    Only promoted chassis are listed. GUID candidates seen on a single node
    keep number 0 and are left out.
    """
    return {
        "chassis": [chassis_to_json_safe_dict(c) for c in fabric.chassis if c.number],
        "nodes": [node_to_json_safe_dict(n) for n in fabric.nodes_in_order()],
    }
