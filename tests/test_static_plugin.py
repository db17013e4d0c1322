import json
from pathlib import Path

import pytest

from fabric_chassis.core.errors import FabricLoadError
from fabric_chassis.core.types import NodeType
from fabric_chassis.discovery.plugins.static import StaticFabricPlugin, fabric_from_dict


def write_json(path: Path, data: object) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


FABRIC = {
    "nodes": [
        {
            "guid": "0x0008f10400000010",
            "vendor_id": "0x08f1",
            "device_id": "0x5a0b",
            "node_type": "switch",
            "distance": 0,
            "num_ports": 24,
        },
        {
            "guid": 0x0008F10400000110,
            "vendor_id": 0x08F1,
            "device_id": 0x5A09,
            "node_type": 2,
            "system_image_guid": "0",
            "distance": 1,
            "num_ports": 24,
        },
    ],
    "links": [
        [{"guid": "0x0008f10400000010", "port": 1}, {"guid": "0x0008f10400000110", "port": 1}],
    ],
}


def test_static_plugin_loads_nodes_and_links(tmp_path):
    path = write_json(tmp_path / "fabric.json", FABRIC)

    fabric = StaticFabricPlugin(path=path).load()

    spine = fabric.get(0x0008F10400000010)
    line = fabric.get(0x0008F10400000110)
    assert spine.device_id == 0x5A0B
    assert line.node_type == NodeType.switch
    assert spine.port(1).remote is line.port(1)
    assert [n.guid for n in fabric.nodes_in_order()] == [spine.guid, line.guid]


def test_missing_field_is_a_load_error():
    with pytest.raises(FabricLoadError):
        fabric_from_dict({"nodes": [{"guid": 1}]})


def test_bad_number_is_a_load_error():
    with pytest.raises(FabricLoadError):
        fabric_from_dict({"nodes": [{"guid": "zz", "vendor_id": 1, "device_id": 1, "node_type": "ca"}]})


def test_unknown_node_type_is_a_load_error():
    with pytest.raises(FabricLoadError):
        fabric_from_dict({"nodes": [{"guid": 1, "vendor_id": 1, "device_id": 1, "node_type": "hub"}]})


def test_link_to_unknown_node_is_a_load_error():
    data = dict(FABRIC)
    data["links"] = [[{"guid": "0x0008f10400000010", "port": 1}, {"guid": 5, "port": 1}]]

    with pytest.raises(FabricLoadError):
        fabric_from_dict(data)


def test_unreadable_file_is_a_load_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(FabricLoadError):
        StaticFabricPlugin(path=path).load()

    with pytest.raises(FabricLoadError):
        StaticFabricPlugin(path=tmp_path / "missing.json").load()
