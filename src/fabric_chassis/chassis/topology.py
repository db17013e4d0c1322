"""
Intra chassis topology walker.

Voltaire chassis modules do not report where they sit. We recover it from the
internal links: the port number on the far side of a spine to line link tells
us, through the wiring tables, which slot and chip the near side occupies.

Placement rules
- spine board: the first switch neighbor fixes the spine generation and slot,
  read from the neighbor's (line board's) port number.
  Every not yet placed non switch neighbor is a router blade and is placed
  from the spine's own port number.
- line board: the first link on a spine facing port (1..12) fixes the slot,
  read from the remote spine port number.
- router: every link to a spine places the router from that spine port.

A lookup against a board that is not one of the four generations means the
tables do not describe this hardware. That is fatal, see UnknownHardwareModel.
"""

from __future__ import annotations

import logging

from fabric_chassis.chassis import wiring
from fabric_chassis.chassis.classify import (
    is_line,
    is_router,
    is_spine,
    is_spine_2012,
    is_spine_9288,
    is_switch,
    spine_generation,
)
from fabric_chassis.chassis.portmap import map_node_ports
from fabric_chassis.core.errors import SlotIndexOutOfRange, UnknownHardwareModel
from fabric_chassis.core.types import LINES_MAX, SPINES_MAX, ChassisType, Node, Port, SlotKind

_LOGGER = logging.getLogger(__name__)

# Line board ports 1..12 face the fabric boards.
SPINE_FACING_MAX_PORT = 12


def _generation_of(spine: Node) -> ChassisType:
    generation = spine_generation(spine)
    if generation is None:
        raise UnknownHardwareModel("Unexpected node found", spine.guid)
    return generation


def assign_spine_slot(node: Node, line_port: Port) -> None:
    """Place a spine board using the port of a line board it links to."""
    generation = _generation_of(node)

    node.slot_kind = SlotKind.spine
    node.chassis_type = generation
    node.slot_number, node.subchip_number = wiring.spine_position(generation, line_port.portnum)


def assign_line_slot(node: Node, spine_port: Port) -> None:
    """Place a line board using the spine port it links to."""
    generation = _generation_of(spine_port.node)

    node.slot_kind = SlotKind.line
    node.chassis_type = generation
    node.slot_number, node.subchip_number = wiring.line_position(generation, spine_port.portnum)


def assign_router_slot(node: Node, spine_port: Port) -> None:
    """
    Place a router blade using the spine port it links to.

    On sFB-12 generations the chip number is a guess, see wiring.guess_router_chip.
    """
    spine = spine_port.node
    generation = _generation_of(spine)

    node.processed = True
    node.slot_kind = SlotKind.srbd
    node.chassis_type = generation
    node.slot_number, node.subchip_number = wiring.router_position(
        generation, spine_port.portnum, spine.guid
    )


def fill_chassis_record(node: Node) -> None:
    """
    Place one node of the topology walked vendor inside its chassis.

    Already processed nodes are skipped, so calling this again on the same
    node, directly or through a neighbor, is a no op.
    """
    if node.processed:
        return
    node.processed = True

    if is_router(node):
        for port in node.iter_ports():
            remote = port.remote
            if remote is None:
                _LOGGER.debug("router 0x%016x port %s has no remote", node.guid, port.portnum)
                continue
            if is_spine(remote.node):
                assign_router_slot(node, remote)
    elif is_spine(node):
        for port in node.iter_ports():
            remote = port.remote
            if remote is None:
                continue
            remnode = remote.node
            if not is_switch(remnode):
                if not remnode.processed:
                    assign_router_slot(remnode, port)
                continue
            # The remote is assumed to be a line board. Keep looping for routers.
            if node.chassis_type == ChassisType.unresolved:
                assign_spine_slot(node, remote)
    elif is_line(node):
        for port in node.iter_ports():
            if port.portnum > SPINE_FACING_MAX_PORT or port.remote is None:
                continue
            # The remote is assumed to be a spine board.
            assign_line_slot(node, port.remote)
            break

    map_node_ports(node)


def line_index(node: Node) -> int:
    """Return the flat line slot index of a line board or router blade."""
    index = 3 * (node.slot_number - 1) + node.subchip_number
    if index < 1 or index > LINES_MAX:
        raise SlotIndexOutOfRange(f"Internal error, line slot index {index}", node.guid)
    return index


def spine_index(node: Node) -> int:
    """Return the flat spine slot index of a spine board."""
    if is_spine_9288(node) or is_spine_2012(node):
        index = 3 * (node.slot_number - 1) + node.subchip_number
    else:
        index = node.slot_number

    if index < 1 or index > SPINES_MAX:
        raise SlotIndexOutOfRange(f"Internal error, spine slot index {index}", node.guid)
    return index
