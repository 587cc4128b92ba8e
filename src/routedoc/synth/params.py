"""Parameter placement and swagger parameter/definition building.

Parameters of one route become either top-level swagger parameters
(path, query, formData) or properties of a generated body definition.
Structured parameters are flattened into named definitions keyed by
the owning route's full name, e.g. `users.create.params.address`.
"""

import logging

from routedoc.descriptor.base import ParameterDescriptor, RouteDescriptor

from .paths import path_variables

logger = logging.getLogger(__name__)

QUERY_VERBS = ("get", "options")


def ref_to(definition_key: str) -> dict:
    return {"$ref": f"#/definitions/{definition_key}"}


def resolve_placement(verb: str, params: list[ParameterDescriptor]) -> str:
    """Detect whether parameters should be placed in query, body or formData.

    Header parameters are not supported.
    """
    if verb in QUERY_VERBS:
        return "query"
    if not params or any(p.is_object for p in params):
        return "body"
    return "formData"


def required_names(params: list[ParameterDescriptor]) -> list[str]:
    return [p.name for p in params if p.required]


class ParameterBuilder:
    """Builds swagger parameters for routes and collects the definitions they need."""

    def __init__(self, definitions: dict | None = None):
        self.definitions = definitions if definitions is not None else {}

    def build(self, route: RouteDescriptor) -> list[dict]:
        """Build the swagger `parameters` array of one route."""
        placement = resolve_placement(route.verb, route.params)
        variables = path_variables(route.path)
        body_key = f"{route.full_name}.params"
        prefix = f"{body_key}."

        logger.debug("%s %s: parameters default to %s", route.verb, route.path, placement)

        result: dict[str, dict] = {}
        body: dict[str, dict] = {}
        body_required: list[str] = []

        for param in route.params:
            conf = self._schema_config(param, prefix)
            in_path = param.name in variables

            if placement == "body" and not in_path:
                body[param.name] = _as_property(conf)
                if param.required and param.name not in body_required:
                    body_required.append(param.name)
                continue

            conf["in"] = "path" if in_path else placement
            conf["name"] = param.name
            # Param in path must be required
            conf["required"] = True if in_path else param.required
            result[param.name] = conf

        parameters = list(result.values())

        if placement == "body":
            if body:
                definition = {"type": "object", "properties": body}
                if body_required:
                    definition["required"] = body_required
                self.definitions[body_key] = definition
                parameters.append({
                    "in": "body",
                    "name": "body",
                    "required": True,
                    "schema": ref_to(body_key),
                })
            else:
                # No declared body fields: accept, but don't require, any payload
                parameters.append({
                    "in": "body",
                    "name": "body",
                    "required": False,
                    "schema": {"type": "object"},
                })

        return parameters

    def build_properties(self, params: list[ParameterDescriptor], prefix: str) -> dict:
        """Build the `properties` map of an object definition."""
        return {p.name: self._schema_config(p, prefix) for p in params}

    def _schema_config(self, param: ParameterDescriptor, prefix: str) -> dict:
        conf = {}
        if param.description is not None:
            conf["description"] = param.description
        if param.default is not None:
            conf["default"] = param.default

        ref = None
        if param.is_object:
            ref = self._add_object_definition(param, prefix)

        kind = param.kind
        if kind == "array":
            conf["type"] = "array"
            conf["items"] = dict(ref) if ref else {"type": param.item_type}
            if param.enum:
                conf["items"]["enum"] = list(param.enum)
        elif kind == "object":
            conf["schema"] = ref
        else:
            if kind == "date":
                conf["type"] = "string"
                conf["format"] = "date-time"
            else:
                conf["type"] = param.type
            if param.enum:
                conf["enum"] = list(param.enum)

        return conf

    def _add_object_definition(self, param: ParameterDescriptor, prefix: str) -> dict:
        key = prefix + param.name
        properties = self.build_properties(param.params, f"{key}.")
        self.definitions[key] = {
            "type": "object",
            "required": required_names(param.params),
            "properties": properties,
        }
        return ref_to(key)


def _as_property(conf: dict) -> dict:
    """Object parameters folded into a body are referenced by their `$ref` schema only."""
    return conf["schema"] if "schema" in conf else conf
