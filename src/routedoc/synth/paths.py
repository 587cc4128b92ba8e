"""Route path templating."""

import re

_VARIABLE_RE = re.compile(r":([a-zA-Z0-9\-_]+)")


def template_path(path: str) -> str:
    """Transfer `:id` style variables into `{id}`."""
    return _VARIABLE_RE.sub(lambda m: "{" + m.group(1) + "}", path)


def path_variables(path: str) -> set[str]:
    """Return the names of all `:name` variables in a raw route path."""
    return set(_VARIABLE_RE.findall(path))
