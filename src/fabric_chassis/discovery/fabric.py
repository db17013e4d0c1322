"""
Discovered fabric.

We keep a simple in memory container as the output of the discovery walk.
Loaders fill it, the grouping driver reads it and appends chassis records.

Ordering
Switches and routers are kept in hop distance buckets, closest first.
Channel adapters always live in the last bucket, MAXHOPS, after every switch
bucket. Iterating buckets in order gives a deterministic traversal.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from fabric_chassis.core.types import Chassis, Node, NodeType

MAXHOPS = 63


@dataclass
class Fabric:
    """
    Node registry keyed by GUID, with hop distance buckets and the chassis list.

    chassis is owned by one grouping run and replaced wholesale by the next.
    """

    _nodes: Dict[int, Node] = field(default_factory=dict)
    _buckets: Dict[int, List[Node]] = field(default_factory=dict)
    max_hops_discovered: int = 0
    chassis: List[Chassis] = field(default_factory=list)

    def add_node(self, node: Node, distance: Optional[int] = None) -> Node:
        """
        Register a node in its hop distance bucket.

        distance defaults to node.distance. Channel adapters are always placed
        in the MAXHOPS bucket.
        """
        if node.guid in self._nodes:
            raise ValueError(f"duplicate node guid 0x{node.guid:016x}")

        if distance is None:
            distance = node.distance

        if node.node_type == NodeType.ca:
            distance = MAXHOPS
        elif distance < 0 or distance >= MAXHOPS:
            raise ValueError(f"hop distance {distance} out of range for node 0x{node.guid:016x}")
        else:
            self.max_hops_discovered = max(self.max_hops_discovered, distance)

        node.distance = distance
        self._nodes[node.guid] = node
        self._buckets.setdefault(distance, []).append(node)
        return node

    def get(self, guid: int) -> Optional[Node]:
        """Return node if present."""
        return self._nodes.get(guid)

    def all(self) -> List[Node]:
        """Return all nodes in traversal order."""
        return list(self.nodes_in_order())

    def nodes_in_order(self, include_cas: bool = True) -> Iterable[Node]:
        """Yield nodes bucket by bucket, switch buckets first, then adapters."""
        for dist in range(0, self.max_hops_discovered + 1):
            yield from self._buckets.get(dist, [])
        if include_cas:
            yield from self._buckets.get(MAXHOPS, [])

    def link(self, guid_a: int, port_a: int, guid_b: int, port_b: int) -> None:
        """Record a symmetric link between two discovered ports."""
        node_a = self._nodes.get(guid_a)
        node_b = self._nodes.get(guid_b)
        if node_a is None or node_b is None:
            missing = guid_a if node_a is None else guid_b
            raise KeyError(f"unknown node guid 0x{missing:016x}")

        a = node_a.add_port(port_a)
        b = node_b.add_port(port_b)
        a.remote = b
        b.remote = a

    def reset_chassis(self) -> None:
        """Discard the chassis list and every grouping field on nodes."""
        self.chassis = []
        for node in self._nodes.values():
            node.clear_grouping()

    def add_chassis(self) -> Chassis:
        """Append a new empty chassis record and return it."""
        chassis = Chassis()
        self.chassis.append(chassis)
        return chassis

    def find_chassis_by_number(self, number: int) -> Optional[Chassis]:
        for chassis in self.chassis:
            if chassis.number == number:
                return chassis
        return None

    def find_chassis_by_guid(self, guid: int) -> Optional[Chassis]:
        for chassis in self.chassis:
            if chassis.guid == guid:
                return chassis
        return None

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterable[Node]:
        """Allow for loops over Fabric, in traversal order."""
        return iter(self.all())
