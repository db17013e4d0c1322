"""
Static fabric plugin.

Reads a local json file that describes an already discovered fabric.
This is useful for offline analysis, tests, and small demos.

Schema example
{
  "nodes": [
    {
      "guid": "0x0008f10400411a08",
      "vendor_id": "0x08f1",
      "device_id": "0x5a0b",
      "node_type": "switch",
      "system_image_guid": "0x0008f10400411a00",
      "distance": 0,
      "num_ports": 24
    }
  ],
  "links": [
    [{"guid": "0x0008f10400411a08", "port": 1}, {"guid": "0x0008f10400411a10", "port": 1}]
  ]
}

Numbers may be given as integers or as hex strings. node_type accepts
"ca", "switch", "router" or the numeric node type.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fabric_chassis.core.errors import FabricLoadError
from fabric_chassis.core.types import Node, NodeType
from fabric_chassis.discovery.fabric import Fabric
from fabric_chassis.discovery.plugins.base import FabricPlugin


def _parse_int(value: Any, what: str) -> int:
    """Convert an int or a numeric string (hex allowed) to int."""
    if isinstance(value, bool):
        raise FabricLoadError(f"{what} must be a number, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value, 0)
        except ValueError as exc:
            raise FabricLoadError(f"{what} is not a number: {value!r}") from exc
    raise FabricLoadError(f"{what} must be a number, got {value!r}")


def _parse_node_type(value: Any) -> NodeType:
    """Convert a node type name or number to NodeType."""
    if isinstance(value, str) and value in NodeType.__members__:
        return NodeType[value]
    try:
        return NodeType(_parse_int(value, "node_type"))
    except ValueError as exc:
        raise FabricLoadError(f"unknown node_type {value!r}") from exc


def _node_from_dict(obj: dict[str, Any]) -> Node:
    """Convert a node dict into a Node."""
    try:
        return Node(
            guid=_parse_int(obj["guid"], "guid"),
            vendor_id=_parse_int(obj["vendor_id"], "vendor_id"),
            device_id=_parse_int(obj["device_id"], "device_id"),
            node_type=_parse_node_type(obj["node_type"]),
            system_image_guid=_parse_int(obj.get("system_image_guid", 0) or 0, "system_image_guid"),
            num_ports=_parse_int(obj.get("num_ports", 0), "num_ports"),
            distance=_parse_int(obj.get("distance", 0), "distance"),
        )
    except KeyError as exc:
        raise FabricLoadError(f"node is missing field {exc.args[0]}") from exc


def _endpoint(raw: Any) -> tuple[int, int]:
    if not isinstance(raw, dict):
        raise FabricLoadError(f"link endpoint must be an object, got {raw!r}")
    try:
        return _parse_int(raw["guid"], "guid"), _parse_int(raw["port"], "port")
    except KeyError as exc:
        raise FabricLoadError(f"link endpoint is missing field {exc.args[0]}") from exc


def fabric_from_dict(data: dict[str, Any]) -> Fabric:
    """Build a linked Fabric from the schema described in the module docstring."""
    nodes = data.get("nodes", [])
    links = data.get("links", [])
    if not isinstance(nodes, list) or not isinstance(links, list):
        raise FabricLoadError("nodes and links must be lists")

    fabric = Fabric()
    for obj in nodes:
        if not isinstance(obj, dict):
            raise FabricLoadError(f"node must be an object, got {obj!r}")
        try:
            fabric.add_node(_node_from_dict(obj))
        except ValueError as exc:
            raise FabricLoadError(str(exc)) from exc

    for raw in links:
        if not isinstance(raw, list) or len(raw) != 2:
            raise FabricLoadError(f"link must be a pair of endpoints, got {raw!r}")
        (guid_a, port_a), (guid_b, port_b) = _endpoint(raw[0]), _endpoint(raw[1])
        try:
            fabric.link(guid_a, port_a, guid_b, port_b)
        except (KeyError, ValueError) as exc:
            raise FabricLoadError(str(exc)) from exc

    return fabric


@dataclass(frozen=True)
class StaticFabricPlugin(FabricPlugin):
    """
    Load a discovered fabric from a local json file.

    path points to a json file that matches the schema described in the module docstring.
    """

    path: Path

    def load(self) -> Fabric:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise FabricLoadError(f"cannot read fabric from {self.path}: {exc}") from exc

        if not isinstance(data, dict):
            raise FabricLoadError("fabric document must be a json object")
        return fabric_from_dict(data)
