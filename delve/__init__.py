"""Delve: procedural dungeon layouts by binary space partitioning."""
