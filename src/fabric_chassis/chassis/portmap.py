"""
External port mapping.

Line board chips number their ports internally. The front panel uses a
different numbering, see the PORT_MAPS tables in wiring.py.
"""

from __future__ import annotations

from fabric_chassis.chassis.classify import line_model
from fabric_chassis.chassis.wiring import external_port
from fabric_chassis.core.types import Node, Port


def map_external_port(port: Port) -> None:
    """Set ext_portnum on one port, 0 when no front panel label applies."""
    node = port.node
    model = line_model(node)

    if not node.processed or model is None:
        port.ext_portnum = 0
        return

    port.ext_portnum = external_port(model, node.subchip_number, port.portnum)


def map_node_ports(node: Node) -> None:
    for port in node.iter_ports():
        map_external_port(port)
