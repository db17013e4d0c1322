"""
Static wiring tables.

Each chassis generation wires its fabric boards to its line boards in a fixed
pattern. Given the port number on one side of an internal link, these tables
give the slot and sub chip (Anafa) number of the module on that side.

All tables are indexed by a 1 based port number, 0..24. Cell 0 is unused.

Table families
- line board seen from a spine port: which line slot and chip sits on that spine port
- spine board seen from a line port: which spine slot and chip sits on that line port
- router blade seen from a spine port: the chip is a table on sFB-4 boards
  and a guess from the spine GUID on sFB-12 boards

The dispatch point is WIRING, keyed by ChassisType. Nothing else in the engine
should branch on generation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from fabric_chassis.chassis.classify import LineModel
from fabric_chassis.core.types import ChassisType

MAX_FABRIC_PORT = 24

Table = Tuple[int, ...]

#                       port: 0  1  2  3  4  5  6  7  8  9 10 11 12 13 14 15 16 17 18 19 20 21 22 23 24
LINE_SLOT_SFB4: Table = (0, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 2, 3, 3, 3, 3, 3, 3, 4, 4, 4, 4, 4, 4)
LINE_CHIP_SFB4: Table = (0, 1, 1, 1, 2, 2, 2, 1, 1, 1, 2, 2, 2, 1, 1, 1, 2, 2, 2, 1, 1, 1, 2, 2, 2)
LINE_SLOT_SFB12: Table = (0, 1, 1, 2, 2, 3, 3, 4, 4, 5, 5, 6, 6, 7, 7, 8, 8, 9, 9, 10, 10, 11, 11, 12, 12)
LINE_CHIP_SFB12: Table = (0, 1, 2, 1, 2, 1, 2, 1, 2, 1, 2, 1, 2, 1, 2, 1, 2, 1, 2, 1, 2, 1, 2, 1, 2)

# Router blade chip, using the sFB-4 port as reference.
ROUTER_CHIP_SFB4: Table = (0, 3, 2, 1, 3, 2, 1, 3, 2, 1, 3, 2, 1, 3, 2, 1, 3, 2, 1, 3, 2, 1, 3, 2, 1)

SPINE12_SLOT_SLB: Table = (0, 1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0)
SPINE12_CHIP_SLB: Table = (0, 1, 2, 3, 1, 2, 3, 1, 2, 3, 1, 2, 3, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0)
SPINE4_SLOT_SLB: Table = (0, 1, 1, 1, 2, 2, 2, 3, 3, 3, 4, 4, 4, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0)
SPINE4_CHIP_SLB: Table = (0, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0)


@dataclass(frozen=True)
class GenerationWiring:
    """
    Wiring of one chassis generation.

    router_chip is None when the router blade chip cannot be read from the
    wiring and has to be guessed from the spine GUID.

    spine_index_by_chip selects the spine slot array layout:
    True  index is 3 * (slot - 1) + chip
    False index is slot
    """

    line_slot: Table
    line_chip: Table
    spine_slot: Table
    spine_chip: Table
    router_chip: Optional[Table]
    spine_index_by_chip: bool


WIRING: Dict[ChassisType, GenerationWiring] = {
    ChassisType.isr9096: GenerationWiring(
        line_slot=LINE_SLOT_SFB4,
        line_chip=LINE_CHIP_SFB4,
        spine_slot=SPINE4_SLOT_SLB,
        spine_chip=SPINE4_CHIP_SLB,
        router_chip=ROUTER_CHIP_SFB4,
        spine_index_by_chip=False,
    ),
    ChassisType.isr9288: GenerationWiring(
        line_slot=LINE_SLOT_SFB12,
        line_chip=LINE_CHIP_SFB12,
        spine_slot=SPINE12_SLOT_SLB,
        spine_chip=SPINE12_CHIP_SLB,
        router_chip=None,
        spine_index_by_chip=True,
    ),
    ChassisType.isr2012: GenerationWiring(
        line_slot=LINE_SLOT_SFB12,
        line_chip=LINE_CHIP_SFB12,
        spine_slot=SPINE12_SLOT_SLB,
        spine_chip=SPINE12_CHIP_SLB,
        router_chip=None,
        spine_index_by_chip=True,
    ),
    ChassisType.isr2004: GenerationWiring(
        line_slot=LINE_SLOT_SFB4,
        line_chip=LINE_CHIP_SFB4,
        spine_slot=SPINE4_SLOT_SLB,
        spine_chip=SPINE4_CHIP_SLB,
        router_chip=ROUTER_CHIP_SFB4,
        spine_index_by_chip=False,
    ),
}


# ---------------------------
# INTERNAL TO EXTERNAL PORT MAPS
# ---------------------------
#
# On line boards the internal chip port numbering does not match the front
# panel labels. Rows are chip 1 and chip 2, columns are internal ports 0..24.
# Only internal ports 13..24 face the front panel.
#
# sLB-8 joins three internal ports into one front panel port.
# sLB-2024 maps chip 1 to front ports 13..24 and chip 2 to 1..12.

PortMap = Tuple[Table, Table]

PORT_MAPS: Dict[LineModel, PortMap] = {
    LineModel.slb24: (
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 6, 5, 4, 18, 17, 16, 1, 2, 3, 13, 14, 15),
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 12, 11, 10, 24, 23, 22, 7, 8, 9, 19, 20, 21),
    ),
    LineModel.slb8: (
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 2, 2, 2, 6, 6, 6, 1, 1, 1, 5, 5, 5),
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 4, 4, 4, 8, 8, 8, 3, 3, 3, 7, 7, 7),
    ),
    LineModel.slb2024: (
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 13, 14, 15, 16, 17, 18, 19, 20, 21, 22, 23, 24),
        (0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12),
    ),
}


def _cell(table: Table, portnum: int) -> int:
    # Ports beyond the table exist on no supported board, treat as unwired.
    if portnum < 0 or portnum > MAX_FABRIC_PORT:
        return 0
    return table[portnum]


def line_position(generation: ChassisType, spine_portnum: int) -> Tuple[int, int]:
    """Return (slot, chip) of the line board wired to this spine port."""
    w = WIRING[generation]
    return _cell(w.line_slot, spine_portnum), _cell(w.line_chip, spine_portnum)


def spine_position(generation: ChassisType, line_portnum: int) -> Tuple[int, int]:
    """Return (slot, chip) of the spine board wired to this line port."""
    w = WIRING[generation]
    return _cell(w.spine_slot, line_portnum), _cell(w.spine_chip, line_portnum)


def guess_router_chip(spine_guid: int) -> int:
    """
    Guess the router blade chip from the sFB-12 node GUID.

    The sFB-12 wiring is not position addressable, so this relies on the
    order node GUIDs are burned on the module:
    module 1 <-> remote chip 3
    module 2 <-> remote chip 2
    module 3 <-> remote chip 1
    """
    guess = spine_guid % 4
    if guess == 3:
        return 1
    if guess == 1:
        return 3
    return 2


def router_position(generation: ChassisType, spine_portnum: int, spine_guid: int) -> Tuple[int, int]:
    """Return (slot, chip) of the router blade wired to this spine port."""
    w = WIRING[generation]
    slot = _cell(w.line_slot, spine_portnum)
    if w.router_chip is None:
        return slot, guess_router_chip(spine_guid)
    return slot, _cell(w.router_chip, spine_portnum)


def external_port(model: LineModel, chip: int, portnum: int) -> int:
    """
    Return the front panel port for an internal line board port.

    0 means no mapping, either because the port is not front facing or the
    chip number is outside 1..2.
    """
    if chip < 1 or chip > 2 or portnum < 13 or portnum > MAX_FABRIC_PORT:
        return 0
    return PORT_MAPS[model][chip - 1][portnum]
