"""Route template entry point tying parser, pattern, matcher and compiler."""

from dataclasses import replace
from typing import Any, Mapping, Optional, Tuple

from route_template.compiler import Compiler
from route_template.matcher import Matcher, MatchResult
from route_template.parser import parse
from route_template.routing import PathPattern, PatternEngine, regex_engine
from route_template.types import OPTION_FIELDS, Key, Options, Token


class PathTemplate:
    """Parsed route template."""

    def __init__(
        self,
        template: str,
        options: Optional[Options] = None,
        engine: PatternEngine = regex_engine,
    ) -> None:
        """Initialize template object."""
        self._template = template
        self._options = options or Options()
        self._tokens = parse(template, self._options)
        self._path_pattern = PathPattern.from_tokens(self._tokens, self._options)
        self._matcher = Matcher(self._path_pattern, self._options, engine)
        self._compiler = Compiler(self._tokens, self._options, engine)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._template!r})"

    def __eq__(self, other) -> bool:
        """Check for equality."""
        if not isinstance(other, PathTemplate):
            return NotImplemented
        return (self._template, self._options) == (other._template, other._options)

    def __hash__(self) -> int:
        return hash((self._template, self._options))

    @property
    def template(self) -> str:
        return self._template

    @property
    def options(self) -> Options:
        return self._options

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    @property
    def keys(self) -> Tuple[Key, ...]:
        return self._path_pattern.keys

    @property
    def pattern(self) -> str:
        """Regular expression string for use with any compatible engine."""
        return self._path_pattern.pattern

    @property
    def path_pattern(self) -> PathPattern:
        return self._path_pattern

    @property
    def compiler(self) -> Compiler:
        return self._compiler

    def match(self, path: str) -> Optional[MatchResult]:
        """Match a concrete path, returning None when it does not match."""
        return self._matcher.match(path)

    def format(self, params: Optional[Mapping[Any, Any]] = None) -> str:
        """Build a concrete path from parameter values."""
        return self._compiler(params)


def from_template(
    template: str,
    options: Optional[Options] = None,
    engine: PatternEngine = regex_engine,
    **kwargs: Any,
) -> PathTemplate:
    """Parse a template, overriding any option fields given as keywords.

    :raise ParseError: if the template is malformed
    """
    if kwargs:
        unknown = sorted(set(kwargs) - OPTION_FIELDS)
        if unknown:
            raise TypeError(
                f"from_template() got unexpected keyword "
                f"arguments: {', '.join(unknown)}"
            )
        options = replace(options or Options(), **kwargs)
    return PathTemplate(template, options, engine)
