"""Swagger 2.0 document synthesis from a route table."""

import copy
import logging

from routedoc.config import DocConfig
from routedoc.descriptor.base import RouteDescriptor

from .content import ACCEPT_TYPES, resolve_consumes
from .params import ParameterBuilder
from .paths import template_path
from .tags import TagRegistry

logger = logging.getLogger(__name__)

SWAGGER_VERSION = "2.0"

# Concrete verbs an `all` route is documented under
ALL_VERBS = ("get", "post", "put", "delete", "patch")


def synthesize(routes: list[RouteDescriptor], config: DocConfig | None = None) -> dict:
    """Build a complete swagger document for the given routes.

    Pure function of its inputs: calling it twice with the same routes
    and config yields equal documents.
    """
    config = config or DocConfig()

    definitions = copy.deepcopy(config.swagger.get("definitions") or {})
    builder = ParameterBuilder(definitions)
    tags = TagRegistry()
    paths: dict[str, dict] = {}

    for route in routes:
        if route.name == config.mount_path or route.verb == "use":
            logger.debug("Skipping %s %s", route.verb, route.path)
            continue

        operation = build_operation(route, builder, tags, config)
        path_item = paths.setdefault(template_path(route.path), {})
        verbs = ALL_VERBS if route.verb == "all" else (route.verb,)
        for verb in verbs:
            path_item[verb] = copy.deepcopy(operation)

    document = {
        "swagger": SWAGGER_VERSION,
        "info": {
            "title": config.title,
            "description": config.description,
            "version": config.version,
        },
        "basePath": "/",
        "schemes": ["http"],
        "host": "",
        "consumes": list(ACCEPT_TYPES),
        "produces": list(config.supported_types),
    }
    document.update(copy.deepcopy(config.swagger))
    document["swagger"] = SWAGGER_VERSION
    document["tags"] = tags.tags
    document["paths"] = paths
    document["definitions"] = definitions

    logger.debug(
        "Synthesized %d paths, %d definitions, %d tags",
        len(paths), len(definitions), len(tags.tags),
    )
    return document


def build_operation(
    route: RouteDescriptor,
    builder: ParameterBuilder,
    tags: TagRegistry,
    config: DocConfig,
) -> dict:
    """Build the swagger Operation object of one route."""
    tag_name = tags.add_route(route)
    parameters = builder.build(route)

    operation = {
        "tags": [tag_name],
        "summary": route.description,
        "description": route.notes,
        "consumes": resolve_consumes(parameters),
        "produces": list(config.supported_types),
        "parameters": parameters,
        "responses": copy.deepcopy(config.default_responses),
    }
    if route.security is not None:
        operation["security"] = copy.deepcopy(route.security)
    return operation
