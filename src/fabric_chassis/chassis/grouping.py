"""
Chassis grouping driver.

Purpose
Turn a discovered fabric into a list of chassis records.

Algorithm
1. Topology walk. Visit every Voltaire node in hop distance order and place it
   in its slot from its internal links, then map its front panel ports.
2. Chassis assembly. Every placed spine not yet in a numbered chassis seeds a
   new chassis, and the builder pulls in the rest of the enclosure.
3. Identity grouping. Every other node with a system image GUID is counted
   against its resolved chassis GUID. A second pass promotes chassis seen on
   more than one node and attaches the nodes to them.

Channel adapters are not counted in step 3, but may join a chassis that
switches already promoted.

Grouping is deterministic. Rerunning on the same fabric first discards the
previous chassis list, then produces the same numbering and slots.

Invariant failures (ChassisInvariantError) propagate unchanged. There is no
partial result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from fabric_chassis.chassis.builder import build_chassis
from fabric_chassis.chassis.classify import VTR_VENDOR_ID, is_spine
from fabric_chassis.chassis.identity import resolve_chassis_guid
from fabric_chassis.chassis.topology import fill_chassis_record
from fabric_chassis.core.types import Chassis
from fabric_chassis.discovery.fabric import Fabric

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupingConfig:
    """
    Grouping configuration.

    topology_vendor_id
    Vendor whose chassis are rebuilt from internal links. Everyone else is
    grouped by system image GUID.

    min_identity_group_size
    A GUID based chassis is promoted only once this many nodes share its GUID.
    """

    topology_vendor_id: int = VTR_VENDOR_ID
    min_identity_group_size: int = 2


def group_nodes(fabric: Fabric, config: Optional[GroupingConfig] = None) -> List[Chassis]:
    """
    Group every node of the fabric into chassis.

    Returns the fabric chassis list, which includes GUID based entries seen on
    a single node. Those keep number 0 and are never attached to a node.
    """
    cfg = config or GroupingConfig()
    fabric.reset_chassis()
    chassisnum = 0

    # Phase 1: place every topology walked node from its internal links.
    for node in fabric.nodes_in_order(include_cas=False):
        if node.vendor_id == cfg.topology_vendor_id:
            fill_chassis_record(node)

    # Phase 2: catch a spine and build the chassis around it.
    for node in fabric.nodes_in_order(include_cas=False):
        if node.vendor_id != cfg.topology_vendor_id:
            continue
        if not node.processed or not is_spine(node):
            continue
        if node.chassis is not None and node.chassis.number:
            continue

        chassis = fabric.add_chassis()
        chassisnum += 1
        chassis.number = chassisnum
        build_chassis(node, chassis)
        _LOGGER.debug(
            "built chassis %d guid 0x%016x from spine 0x%016x",
            chassis.number,
            chassis.guid,
            node.guid,
        )

    topology_count = len(fabric.chassis)
    _LOGGER.info("topology walk built %d chassis", topology_count)

    # Phase 3: count nodes per resolved chassis GUID.
    for node in fabric.nodes_in_order(include_cas=False):
        if node.vendor_id == cfg.topology_vendor_id or not node.system_image_guid:
            continue

        chguid = resolve_chassis_guid(node)
        chassis = fabric.find_chassis_by_guid(chguid)
        if chassis is not None:
            chassis.node_count += 1
        else:
            # Possible new chassis.
            chassis = fabric.add_chassis()
            chassis.guid = chguid
            chassis.node_count = 1

    # Promote chassis seen on enough nodes and attach their members.
    for node in fabric.nodes_in_order(include_cas=True):
        if node.vendor_id == cfg.topology_vendor_id or not node.system_image_guid:
            continue

        chassis = fabric.find_chassis_by_guid(resolve_chassis_guid(node))
        if chassis is None or chassis.node_count < cfg.min_identity_group_size:
            continue

        if not chassis.number:
            chassisnum += 1
            chassis.number = chassisnum
        if not node.processed:
            node.processed = True
            chassis.add_node(node)

    _LOGGER.info(
        "identity grouping promoted %d chassis, %d chassis total",
        chassisnum - topology_count,
        chassisnum,
    )
    return fabric.chassis
