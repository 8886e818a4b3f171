"""Test route template entry point."""

import logging

import pytest

from route_template import (
    DuplicateParameterName,
    InvalidParameterValue,
    MissingParameter,
    Options,
    PathTemplate,
    from_template,
)


def test_from_template_scenarios():
    """Scenarios from the template syntax."""
    template = from_template("/user/:id")
    assert template.match("/user/123").params == {"id": "123"}
    assert template.match("/user/") is None

    with pytest.raises(MissingParameter) as err:
        template.format({})
    assert err.value.name == "id"

    assert from_template("/file/*path").format({"path": ["a", "b"]}) == "/file/a/b"

    template = from_template(r"/user/(\d+)")
    assert template.match("/user/abc") is None
    assert template.match("/user/42").captures[1].value == "42"


def test_from_template_not_end():
    """The trailing remainder is part of the whole match but not of path."""
    result = from_template("/test", end=False).match("/test/route")
    assert result.captures[0].value == "/test/route"
    assert result.trailing == "/route"
    assert result.path == "/test"


def test_from_template_keyword_options():
    """Keyword options override the given options."""
    template = from_template("/user/:id", Options(strict=True), sensitive=True)
    assert template.options == Options(strict=True, sensitive=True)
    assert template.pattern == r"^/user(?:/([^/]+?))\Z"


def test_from_template_unknown_options():
    """Unknown keyword options are rejected by name."""
    with pytest.raises(TypeError, match="unexpected keyword arguments: bar, foo"):
        from_template("/user/:id", foo=1, bar=2)


def test_from_template_parse_error():
    """Parse errors surface at construction."""
    with pytest.raises(DuplicateParameterName):
        from_template("/:id/:id")


def test_template_properties():
    """Tokens, keys and pattern stay consistent."""
    template = PathTemplate("/user/:id/post/:post?")
    assert template.template == "/user/:id/post/:post?"
    assert len(template.tokens) == 4
    assert [key.name for key in template.keys] == ["id", "post"]
    assert template.keys == template.path_pattern.keys
    assert template.pattern == template.path_pattern.pattern
    assert template.compiler({"id": 1}) == "/user/1/post"
    assert repr(template) == "PathTemplate('/user/:id/post/:post?')"


def test_template_equality():
    """Templates compare by template and options."""
    assert PathTemplate("/a/:b") == PathTemplate("/a/:b")
    assert PathTemplate("/a/:b") != PathTemplate("/a/:b", Options(strict=True))
    assert len({PathTemplate("/a/:b"), PathTemplate("/a/:b")}) == 1


@pytest.mark.parametrize(
    "template,params",
    [
        ("/user/:id", {"id": "123"}),
        ("/user/:id/post/:post", {"id": "7", "post": "hello-world"}),
        (r"/:year(\d{4})/:slug", {"year": "2024", "slug": "news"}),
        ("/file.:ext", {"ext": "json"}),
        ("/:lang?/docs", {"lang": "en"}),
        ("/file/*path", {"path": ["a", "b", "c"]}),
        ("/:segment+", {"segment": ["x", "y"]}),
    ],
)
def test_round_trip(template, params):
    """Compiled paths match back to the same values."""
    path_template = from_template(template)
    path = path_template.format(params)
    assert path_template.match(path).params == params


def test_round_trip_encoded(url_options):
    """Encode and decode invert each other through a round trip."""
    template = from_template("/search/:query", url_options)
    path = template.format({"query": "a b/c"})
    assert path == "/search/a%20b%2Fc"
    assert template.match(path).params == {"query": "a b/c"}


def test_template_logging(caplog):
    """Parsing and building are logged at debug level."""
    caplog.set_level(logging.DEBUG, logger="route_template")
    from_template("/user/:id")
    assert "Parsed '/user/:id' into 2 tokens" in caplog.text
    assert r"Built pattern ^/user(?:/([^/]+?))[/]?\Z with 1 keys" in caplog.text


def test_from_template_trailing_newline():
    """Trailing newlines neither match nor pass validation."""
    template = from_template(r"/user/(\d+)")
    assert template.match("/user/42\n") is None
    with pytest.raises(InvalidParameterValue):
        template.format({0: "42\n"})
    assert from_template("/test", strict=True).match("/test\n") is None
