"""Test patterns functionality."""

from route_template.patterns import TRAILING_GROUP, name_expr


def test_patterns_regex_usage():
    """Names stop at the first character outside [a-zA-Z0-9_]."""
    match = name_expr.match("/user/:user_id2/post", 7)
    assert match is not None
    assert match.group() == "user_id2"

    assert name_expr.match("/:-x", 2) is None
    assert TRAILING_GROUP.isidentifier()
