"""Route table loader.

Reads a YAML or JSON route table into RouteDescriptor models.
"""

from pathlib import Path

import yaml

from .base import RouteDescriptor, RouteGroup


def load_route_table(file_path: Path) -> list[RouteDescriptor]:
    """Parse a route table file into a list of RouteDescriptor."""
    text = file_path.read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{file_path}: route table must be a mapping")
    return parse_route_table(data)


def parse_route_table(data: dict) -> list[RouteDescriptor]:
    """Build RouteDescriptor objects from an already-decoded route table."""
    routes: list[RouteDescriptor] = []

    for group_data in data.get("groups") or []:
        group_data = dict(group_data)
        route_items = group_data.pop("routes", [])
        group = RouteGroup.model_validate(group_data)
        for item in route_items:
            routes.append(_parse_route(item, group))

    for item in data.get("routes") or []:
        routes.append(_parse_route(item, None))

    return routes


def _parse_route(item: dict, group: RouteGroup | None) -> RouteDescriptor:
    return RouteDescriptor.model_validate({**item, "parent": group})
