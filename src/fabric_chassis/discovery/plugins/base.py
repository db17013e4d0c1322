"""
Fabric loader interfaces.

Goal
Keep the grouping engine independent of how the fabric was discovered.
A live discovery walk, a saved dump, or a test fixture all produce a Fabric.

We keep the interface narrow so it is easy to mock in tests.
"""

from __future__ import annotations

from typing import Protocol

from fabric_chassis.discovery.fabric import Fabric


class FabricPlugin(Protocol):
    """
    Fabric loader interface.

    load returns a fully linked Fabric with no grouping applied.
    """

    def load(self) -> Fabric:
        """Load a discovered fabric."""
