"""Route templates: parse, match and build paths like ``/user/:id``."""

from route_template.compiler import Compiler, compiler
from route_template.exceptions import (
    CompileError,
    DanglingModifier,
    DuplicateParameterName,
    EmptyRepeatingValue,
    InvalidParameterValue,
    InvalidPattern,
    MissingParameter,
    MissingParameterName,
    ParseError,
    RouteTemplateError,
    UnbalancedGroup,
    UnexpectedToken,
)
from route_template.logs import configure_logging
from route_template.matcher import Capture, Matcher, MatchResult
from route_template.parser import parse
from route_template.routing import PathPattern, build_pattern, regex_engine
from route_template.template import PathTemplate, from_template
from route_template.types import Key, Literal, Modifier, Options, Parameter, Token

__version__ = "1.0.0"

__all__ = [
    "Capture",
    "CompileError",
    "Compiler",
    "DanglingModifier",
    "DuplicateParameterName",
    "EmptyRepeatingValue",
    "InvalidParameterValue",
    "InvalidPattern",
    "Key",
    "Literal",
    "MatchResult",
    "Matcher",
    "MissingParameter",
    "MissingParameterName",
    "Modifier",
    "Options",
    "Parameter",
    "ParseError",
    "PathPattern",
    "PathTemplate",
    "RouteTemplateError",
    "Token",
    "UnbalancedGroup",
    "UnexpectedToken",
    "build_pattern",
    "compiler",
    "configure_logging",
    "from_template",
    "parse",
    "regex_engine",
]
