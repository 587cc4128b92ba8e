from pathlib import Path

import pytest
from pydantic import ValidationError

from routedoc.descriptor.base import ParameterDescriptor, RouteDescriptor, RouteGroup
from routedoc.descriptor.loader import load_route_table, parse_route_table

FIXTURES = Path(__file__).parent / "fixtures"


class TestParameterDescriptor:
    def test_defaults(self):
        p = ParameterDescriptor(name="q")
        assert p.type == "string"
        assert p.required is False
        assert p.params is None
        assert p.kind == "scalar"

    def test_object_kind_ignores_type(self):
        p = ParameterDescriptor(name="user", type="string", params=[{"name": "age", "type": "number"}])
        assert p.is_object is True
        assert p.kind == "object"
        assert p.params[0].name == "age"

    def test_empty_nested_params_is_object(self):
        assert ParameterDescriptor(name="meta", params=[]).kind == "object"

    def test_array_wins_over_object(self):
        p = ParameterDescriptor(name="tags", type=["tag"], params=[{"name": "label"}])
        assert p.kind == "array"
        assert p.item_type == "tag"

    def test_date_kind(self):
        assert ParameterDescriptor(name="at", type="date").kind == "date"

    def test_array_type_must_have_one_item(self):
        with pytest.raises(ValidationError):
            ParameterDescriptor(name="bad", type=["string", "number"])


class TestRouteDescriptor:
    def test_full_name_from_group(self):
        route = RouteDescriptor(path="/users", verb="get", name="list", parent=RouteGroup(name="users"))
        assert route.full_name == "users.list"

    def test_full_name_without_group(self):
        route = RouteDescriptor(path="/ping", verb="get", name="ping")
        assert route.full_name == "ping"

    def test_explicit_full_name_camel_case(self):
        route = RouteDescriptor.model_validate(
            {"path": "/ping", "verb": "GET", "name": "ping", "fullName": "system.ping"}
        )
        assert route.full_name == "system.ping"
        assert route.verb == "get"

    def test_unknown_verb_rejected(self):
        with pytest.raises(ValidationError):
            RouteDescriptor(path="/x", verb="head", name="x")


class TestLoader:
    def test_load_fixture(self):
        routes = load_route_table(FIXTURES / "routes.yaml")
        assert len(routes) == 7
        names = [r.full_name for r in routes]
        assert names[0] == "users.list"
        assert names[-1] == "system.ping"

    def test_group_is_attached(self):
        routes = load_route_table(FIXTURES / "routes.yaml")
        upload = [r for r in routes if r.name == "upload"][0]
        assert upload.parent.name == "files"
        assert upload.parent.settings["description"] == "File storage"
        ping = [r for r in routes if r.name == "ping"][0]
        assert ping.parent is None

    def test_load_json(self, tmp_path):
        f = tmp_path / "routes.json"
        f.write_text('{"routes": [{"name": "ping", "path": "/ping", "verb": "get"}]}')
        routes = load_route_table(f)
        assert routes[0].path == "/ping"

    def test_non_mapping_rejected(self, tmp_path):
        f = tmp_path / "routes.yaml"
        f.write_text("- just\n- a list\n")
        with pytest.raises(ValueError):
            load_route_table(f)

    def test_empty_table(self):
        assert parse_route_table({}) == []

    def test_blank_sections(self, tmp_path):
        f = tmp_path / "routes.yaml"
        f.write_text("groups:\nroutes:\n")
        assert load_route_table(f) == []
