import re

import pytest

from routedoc.synth.paths import path_variables, template_path


class TestTemplatePath:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("/users/:id", "/users/{id}"),
            ("/users/:userId/posts/:post_id", "/users/{userId}/posts/{post_id}"),
            ("/files/:file-name.json", "/files/{file-name}.json"),
            ("/static", "/static"),
        ],
    )
    def test_template(self, raw, expected):
        assert template_path(raw) == expected

    def test_no_residual_colon_token(self):
        result = template_path("/a/:id/b/:id2")
        assert not re.search(r":[a-zA-Z0-9\-_]+", result)


class TestPathVariables:
    def test_collects_names(self):
        assert path_variables("/users/:id/posts/:postId") == {"id", "postId"}

    def test_prefix_names_do_not_match(self):
        assert "id" not in path_variables("/users/:idx")
