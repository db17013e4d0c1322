"""
Chassis builder.

Given one placed spine board, pull in every line board, spine board and router
blade of the same physical enclosure.

Algorithm
1. Insert the seed spine.
2. Insert every placed neighbor of the seed into the line array.
3. Lines catch spines, then spines catch lines, twice.
   Routers hang only off some spine slots and pure in chassis connectivity can
   leave chips unreached after one round, so the second round closes the gap.
4. Interpolate the chassis GUID from the first occupied spine slot.

Slot insertion never overwrites an occupied slot, so every pass can be rerun
on a complete chassis without changing it.
"""

from __future__ import annotations

import logging

from fabric_chassis.chassis.classify import is_line
from fabric_chassis.chassis.topology import SPINE_FACING_MAX_PORT, line_index, spine_index
from fabric_chassis.core.types import Chassis, Node

_LOGGER = logging.getLogger(__name__)


def insert_line_router(node: Node, chassis: Chassis) -> bool:
    """Place a line board or router blade into the line array. Return True if inserted."""
    i = line_index(node)
    if chassis.line_nodes[i] is not None:
        return False

    chassis.line_nodes[i] = node
    node.chassis = chassis
    return True


def insert_spine(node: Node, chassis: Chassis) -> bool:
    """Place a spine board into the spine array. Return True if inserted."""
    i = spine_index(node)
    if chassis.spine_nodes[i] is not None:
        return False

    chassis.spine_nodes[i] = node
    node.chassis = chassis
    return True


def pass_on_lines_catch_spines(chassis: Chassis) -> int:
    """Follow spine facing links of every line board. Return the number of inserts."""
    inserted = 0
    for node in list(chassis.line_nodes):
        # Empty slot or router blade.
        if node is None or not is_line(node):
            continue

        for port in node.iter_ports():
            if port.portnum > SPINE_FACING_MAX_PORT or port.remote is None:
                continue

            remnode = port.remote.node
            if not remnode.processed:
                _LOGGER.debug("skipping unplaced spine 0x%016x seen from line 0x%016x", remnode.guid, node.guid)
                continue
            if insert_spine(remnode, chassis):
                inserted += 1
    return inserted


def pass_on_spines_catch_lines(chassis: Chassis) -> int:
    """Follow every link of every spine board. Return the number of inserts."""
    inserted = 0
    for node in list(chassis.spine_nodes):
        if node is None:
            continue

        for port in node.iter_ports():
            if port.remote is None:
                continue

            remnode = port.remote.node
            if not remnode.processed:
                _LOGGER.debug("skipping unplaced module 0x%016x seen from spine 0x%016x", remnode.guid, node.guid)
                continue
            if insert_line_router(remnode, chassis):
                inserted += 1
    return inserted


def interpolate_chassis_guid(chassis: Chassis) -> None:
    """
    Set the chassis GUID to the first spine GUID minus one.

    Not a real identifier. The subnet manager and management system number
    chassis this way, and reports must agree with them.
    """
    for node in chassis.spine_nodes:
        if node is None:
            continue
        chassis.guid = node.guid - 1
        break


def build_chassis(spine: Node, chassis: Chassis) -> None:
    """Fill chassis with every module of the enclosure that holds spine."""
    insert_spine(spine, chassis)

    for port in spine.iter_ports():
        if port.remote is None:
            continue
        remnode = port.remote.node
        if not remnode.processed:
            continue
        insert_line_router(remnode, chassis)

    pass_on_lines_catch_spines(chassis)
    pass_on_spines_catch_lines(chassis)

    pass_on_lines_catch_spines(chassis)
    pass_on_spines_catch_lines(chassis)

    interpolate_chassis_guid(chassis)
