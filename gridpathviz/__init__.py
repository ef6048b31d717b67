"""Step-by-step A* pathfinding visualization on an editable grid."""

__version__ = "0.1.0"