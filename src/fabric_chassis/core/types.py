"""
Core types.

This file defines the shared data structures used across the engine.

Important design choice
The discovery graph is cyclic: a line board links to a spine, which links back
to the line board and on to router blades. We keep nodes and ports as plain
mutable records and store remote links as non owning references, so the graph
can be walked in any direction without copying.

Nothing here knows about vendors or wiring tables. Classification lives in
fabric_chassis.chassis.classify.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional

# Fixed slot array capacities. Index 0 is never used, slots are 1 based.
LINES_MAX = 36
SPINES_MAX = 18


class NodeType(int, Enum):
    """
    Node type as reported by the management record.

    ca
      Channel adapter, host or target.

    switch
      Switch chip, including every chassis line and spine board.

    router
      Router, including router blades attached to a fabric board.
    """

    ca = 1
    switch = 2
    router = 3


class ChassisType(int, Enum):
    """
    Chassis hardware generation.

    The numbering is stable because the reporting layer indexes labels by it.
    unresolved means the node was never placed by the topology walk.
    """

    unresolved = 0
    isr9288 = 1
    isr9096 = 2
    isr2012 = 3
    isr2004 = 4


class SlotKind(int, Enum):
    """
    Kind of slot a chassis module occupies.

    line
      Line board, host facing ports.

    spine
      Fabric board, central switching.

    srbd
      Router blade attached to a fabric board.
    """

    unresolved = 0
    line = 1
    spine = 2
    srbd = 3


@dataclass(eq=False)
class Port:
    """
    One physical port of a Node.

    portnum is 1 based and unique within the node.
    ext_portnum is the front panel label, 0 when not applicable.
    remote is the linked port if discovery saw the link.
    """

    node: "Node" = field(repr=False)
    portnum: int
    ext_portnum: int = 0
    remote: Optional["Port"] = field(default=None, repr=False)

    @property
    def remote_node(self) -> Optional["Node"]:
        """Return the node owning the remote port, or None if unlinked."""
        if self.remote is None:
            return None
        return self.remote.node


@dataclass(eq=False)
class Node:
    """
    A discovered switch, router or channel adapter.

    The identity fields come from the management record and never change.
    The grouping fields are written by the grouping driver:
    chassis, chassis_type, slot_kind, slot_number, subchip_number, processed.

    slot fields are only meaningful when processed is True and slot_kind is
    not unresolved.
    """

    guid: int
    vendor_id: int
    device_id: int
    node_type: NodeType
    system_image_guid: int = 0
    num_ports: int = 0
    distance: int = 0
    ports: Dict[int, Port] = field(default_factory=dict, repr=False)

    chassis: Optional["Chassis"] = field(default=None, repr=False)
    chassis_type: ChassisType = ChassisType.unresolved
    slot_kind: SlotKind = SlotKind.unresolved
    slot_number: int = 0
    subchip_number: int = 0
    processed: bool = False

    def add_port(self, portnum: int) -> Port:
        """Return the port with this number, creating it on first use."""
        if portnum < 1 or portnum > self.num_ports:
            raise ValueError(
                f"port {portnum} out of range for node 0x{self.guid:016x} with {self.num_ports} ports"
            )
        port = self.ports.get(portnum)
        if port is None:
            port = Port(node=self, portnum=portnum)
            self.ports[portnum] = port
        return port

    def port(self, portnum: int) -> Optional[Port]:
        """Return the port with this number if it was discovered."""
        return self.ports.get(portnum)

    def iter_ports(self) -> Iterator[Port]:
        """Iterate discovered ports in port number order."""
        for portnum in range(1, self.num_ports + 1):
            port = self.ports.get(portnum)
            if port is not None:
                yield port

    def clear_grouping(self) -> None:
        """Forget everything a previous grouping run wrote on this node."""
        self.chassis = None
        self.chassis_type = ChassisType.unresolved
        self.slot_kind = SlotKind.unresolved
        self.slot_number = 0
        self.subchip_number = 0
        self.processed = False
        for port in self.ports.values():
            port.ext_portnum = 0


def _empty_slots(size: int) -> List[Optional[Node]]:
    return [None] * (size + 1)


@dataclass(eq=False)
class Chassis:
    """
    A physical enclosure.

    number is 1 based in discovery order, 0 while not promoted.
    guid is either interpolated from a spine board or derived from a
    system image GUID.

    line_nodes and spine_nodes are indexed 1..LINES_MAX and 1..SPINES_MAX.
    nodes is the membership list used by identity based grouping.
    """

    number: int = 0
    guid: int = 0
    node_count: int = 0
    line_nodes: List[Optional[Node]] = field(default_factory=lambda: _empty_slots(LINES_MAX), repr=False)
    spine_nodes: List[Optional[Node]] = field(default_factory=lambda: _empty_slots(SPINES_MAX), repr=False)
    nodes: List[Node] = field(default_factory=list, repr=False)

    def add_node(self, node: Node) -> None:
        """Attach a node to the membership list."""
        node.chassis = self
        self.nodes.append(node)

    def occupied_lines(self) -> Dict[int, Node]:
        """Return line slot index to node for occupied slots."""
        return {i: n for i, n in enumerate(self.line_nodes) if n is not None}

    def occupied_spines(self) -> Dict[int, Node]:
        """Return spine slot index to node for occupied slots."""
        return {i: n for i, n in enumerate(self.spine_nodes) if n is not None}
