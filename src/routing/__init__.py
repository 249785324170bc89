"""Routing inspection: per-target connection lookups and DOT rendering."""
from .connection_index import ConnectionIndex, ConnectionNotFoundError, RoutingError
from .graph import (
    create_default_graph,
    create_modulation_dot_graph,
    default_region_lines,
    render_routing_graph,
    routing_lines,
)

__all__ = [
    "ConnectionIndex",
    "ConnectionNotFoundError",
    "RoutingError",
    "create_default_graph",
    "create_modulation_dot_graph",
    "default_region_lines",
    "render_routing_graph",
    "routing_lines",
]
