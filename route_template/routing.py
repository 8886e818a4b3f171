"""Convert template tokens into a regular expression and its keys."""

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Protocol, Tuple

from route_template.parser import parse
from route_template.patterns import (
    DEFAULT_DELIMITER,
    TRAILING_GROUP,
    WILDCARD_PATTERN,
)
from route_template.types import Key, Literal, Options, Parameter, Token

log = logging.getLogger(__name__)


class MatchLike(Protocol):
    def group(self, *groups: Any) -> Any:
        ...

    def groupdict(self) -> Dict[str, Optional[str]]:
        ...

    def start(self) -> int:
        ...


class CompiledPattern(Protocol):
    def search(self, string: str) -> Optional[MatchLike]:
        ...


PatternEngine = Callable[[str, bool], CompiledPattern]


def regex_engine(pattern: str, sensitive: bool) -> CompiledPattern:
    """Compile a pattern with the standard ``re`` module."""
    return re.compile(pattern, 0 if sensitive else re.IGNORECASE)


def _parameter_to_regex(token: Parameter, delimiter_re: str) -> str:
    prefix = re.escape(token.prefix)
    suffix = re.escape(token.suffix)
    modifier = token.modifier.value

    if token.is_static:
        return f"(?:{prefix}{suffix}){modifier}"

    pattern = token.pattern
    optional = "?" if token.modifier.optional else ""
    # wildcards span delimiters; their repeats are one group
    repeat = token.modifier.repeat and pattern != WILDCARD_PATTERN
    if prefix or suffix:
        if repeat:
            return (
                f"(?:{prefix}((?:{pattern})(?:{suffix}{prefix}(?:{pattern}))*)"
                f"{suffix}){optional}"
            )
        return f"(?:{prefix}({pattern}){suffix}){optional}"

    if repeat:
        return f"((?:{pattern})(?:{delimiter_re}(?:{pattern}))*){optional}"
    return f"({pattern}){optional}"


def _is_end_delimited(tokens: Tuple[Token, ...], delimiter: str) -> bool:
    if not tokens:
        return True
    last = tokens[-1]
    return isinstance(last, Literal) and last.text[-1] in delimiter


def build_pattern(
    tokens: Tuple[Token, ...], options: Optional[Options] = None
) -> Tuple[str, Tuple[Key, ...]]:
    """Build the regular expression and ordered keys for a token sequence."""
    options = options or Options()
    delimiter_re = options.delimiter_re
    ends_with_re = f"[{re.escape(options.ends_with)}]" if options.ends_with else ""

    route = "^" if options.start else ""
    keys: List[Key] = []
    for token in tokens:
        if isinstance(token, Literal):
            route += re.escape(token.text)
            continue
        if not token.is_static:
            keys.append(token.key)
        route += _parameter_to_regex(token, delimiter_re)

    if not options.strict:
        route += f"{delimiter_re}?"

    if options.end:
        if ends_with_re:
            route += f"(?P<{TRAILING_GROUP}>{ends_with_re}.*|)"
    elif _is_end_delimited(tokens, options.delimiter):
        route += f"(?P<{TRAILING_GROUP}>.*)"
    else:
        boundary = f"{delimiter_re}|{ends_with_re}" if ends_with_re else delimiter_re
        route += f"(?P<{TRAILING_GROUP}>(?:{boundary}).*|)"
    route += r"\Z"

    log.debug("Built pattern %s with %d keys", route, len(keys))
    return route, tuple(keys)


@dataclass(frozen=True)
class PathPattern:
    """Regular expression for a template, with the keys of its groups."""

    pattern: str
    keys: Tuple[Key, ...]
    sensitive: bool = False
    delimiter: str = DEFAULT_DELIMITER

    @classmethod
    def from_tokens(
        cls, tokens: Tuple[Token, ...], options: Optional[Options] = None
    ) -> "PathPattern":
        options = options or Options()
        pattern, keys = build_pattern(tokens, options)
        return cls(pattern, keys, options.sensitive, options.delimiter)

    @classmethod
    def from_template(
        cls, template: str, options: Optional[Options] = None
    ) -> "PathPattern":
        options = options or Options()
        return cls.from_tokens(parse(template, options), options)

    def compile(self, engine: PatternEngine = regex_engine) -> CompiledPattern:
        """Hand the pattern to a matching engine."""
        return engine(self.pattern, self.sensitive)

    def __str__(self) -> str:
        return self.pattern
