"""
fabric_chassis

This package rebuilds physical chassis from a discovered InfiniBand fabric.

We keep modules small and well separated:
core contains shared data structures and errors
discovery contains the fabric container and loaders
chassis contains classification, wiring tables and the grouping algorithm
cli wires a static loader to the grouping driver
"""
