"""
Chassis package.

Exposes the grouping entry points and the reporting queries.
"""

from fabric_chassis.chassis.grouping import GroupingConfig, group_nodes
from fabric_chassis.chassis.report import chassis_slot_str, chassis_type_label, get_chassis_guid

__all__ = [
    "GroupingConfig",
    "chassis_slot_str",
    "chassis_type_label",
    "get_chassis_guid",
    "group_nodes",
]
