"""Tag aggregation from route groups."""

from routedoc.descriptor.base import RouteDescriptor


class TagRegistry:
    """Ordered, name-deduplicated swagger tags. First description wins."""

    def __init__(self):
        self.tags: list[dict] = []
        self._names: set[str] = set()

    def add(self, name: str, description: str) -> None:
        if name in self._names:
            return
        self.tags.append({"name": name, "description": description})
        self._names.add(name)

    def add_route(self, route: RouteDescriptor) -> str:
        """Register the tag of a route's owning group and return its name."""
        name, description = route_tag(route)
        self.add(name, description)
        return name


def route_tag(route: RouteDescriptor) -> tuple[str, str]:
    group = route.parent
    if group is None:
        return "", ""
    description = group.description or group.settings.get("description") or ""
    return group.name or "", description
