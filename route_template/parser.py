"""Parse route templates into literal and parameter tokens."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Set, Tuple

from route_template.exceptions import (
    DanglingModifier,
    DuplicateParameterName,
    InvalidPattern,
    MissingParameterName,
    ParseError,
    UnbalancedGroup,
    UnexpectedToken,
)
from route_template.patterns import MODIFIERS, WILDCARD_PATTERN, name_expr
from route_template.types import Literal, Modifier, Name, Options, Parameter, Token

log = logging.getLogger(__name__)


class LexKind(Enum):
    OPEN = "OPEN"
    CLOSE = "CLOSE"
    PATTERN = "PATTERN"
    NAME = "NAME"
    SPLAT = "SPLAT"
    WILDCARD = "WILDCARD"
    CHAR = "CHAR"
    ESCAPED_CHAR = "ESCAPED_CHAR"
    MODIFIER = "MODIFIER"
    END = "END"


# A "*" right after one of these is a modifier rather than a wildcard
_ATTACHABLE = (
    LexKind.NAME,
    LexKind.PATTERN,
    LexKind.CLOSE,
    LexKind.SPLAT,
    LexKind.WILDCARD,
)


@dataclass(frozen=True)
class LexToken:
    kind: LexKind
    index: int
    value: str


def _read_pattern(template: str, index: int) -> Tuple[str, int]:
    """Return the pattern opened at ``index`` and the index after its ``)``."""
    count = 1
    j = index + 1
    if template.startswith("?", j):
        raise InvalidPattern(f'Pattern cannot start with "?" at {j}', j)

    while j < len(template):
        char = template[j]
        if char == "\\":
            j += 2
            continue
        if char == ")":
            count -= 1
            if count == 0:
                break
        elif char == "(":
            count += 1
            if not template.startswith("?", j + 1):
                raise InvalidPattern(f"Capturing groups are not allowed at {j}", j)
        j += 1

    if count:
        raise UnbalancedGroup(f"Unbalanced pattern at {index}", index)

    pattern = template[index + 1 : j]
    if not pattern:
        raise InvalidPattern(f"Missing pattern at {index}", index)
    return pattern, j + 1


def lex(template: str) -> List[LexToken]:
    """Split a template into lexical tokens, always ending with ``END``."""
    tokens: List[LexToken] = []
    i = 0
    while i < len(template):
        char = template[i]
        previous = tokens[-1].kind if tokens else None

        if char == "*" and previous not in _ATTACHABLE:
            name = name_expr.match(template, i + 1)
            if name:
                tokens.append(LexToken(LexKind.SPLAT, i, name.group()))
                i = name.end()
            else:
                tokens.append(LexToken(LexKind.WILDCARD, i, char))
                i += 1
            continue

        if char in MODIFIERS:
            tokens.append(LexToken(LexKind.MODIFIER, i, char))
            i += 1
            continue

        if char == "\\":
            if i + 1 >= len(template):
                raise ParseError(f"Unterminated escape at {i}", i)
            tokens.append(LexToken(LexKind.ESCAPED_CHAR, i, template[i + 1]))
            i += 2
            continue

        if char == "{":
            tokens.append(LexToken(LexKind.OPEN, i, char))
            i += 1
            continue

        if char == "}":
            tokens.append(LexToken(LexKind.CLOSE, i, char))
            i += 1
            continue

        if char == ":":
            name = name_expr.match(template, i + 1)
            if not name:
                raise MissingParameterName(f"Missing parameter name at {i}", i)
            tokens.append(LexToken(LexKind.NAME, i, name.group()))
            i = name.end()
            continue

        if char == "(":
            pattern, end = _read_pattern(template, i)
            tokens.append(LexToken(LexKind.PATTERN, i, pattern))
            i = end
            continue

        tokens.append(LexToken(LexKind.CHAR, i, char))
        i += 1

    tokens.append(LexToken(LexKind.END, i, ""))
    return tokens


def _unexpected(token: LexToken, expected: LexKind) -> ParseError:
    if token.kind is LexKind.MODIFIER:
        return DanglingModifier(
            f'Unexpected modifier "{token.value}" at {token.index}', token.index
        )
    if token.kind is LexKind.CLOSE or (
        expected is LexKind.CLOSE and token.kind in (LexKind.OPEN, LexKind.END)
    ):
        return UnbalancedGroup(
            f"Unexpected {token.kind.value} at {token.index}, "
            f"expected {expected.value}",
            token.index,
        )
    return UnexpectedToken(
        f"Unexpected {token.kind.value} at {token.index}, expected {expected.value}",
        token.index,
    )


class _LexStream:
    def __init__(self, tokens: List[LexToken]) -> None:
        self._tokens = tokens
        self._position = 0

    @property
    def done(self) -> bool:
        return self._position >= len(self._tokens)

    def peek(self) -> LexToken:
        return self._tokens[self._position]

    def try_consume(self, kind: LexKind) -> Optional[str]:
        if not self.done and self.peek().kind is kind:
            self._position += 1
            return self._tokens[self._position - 1].value
        return None

    def must_consume(self, kind: LexKind) -> str:
        value = self.try_consume(kind)
        if value is None:
            raise _unexpected(self.peek(), kind)
        return value

    def try_modifier(self) -> Modifier:
        value = self.try_consume(LexKind.MODIFIER)
        return Modifier(value) if value else Modifier.NONE

    def consume_text(self) -> str:
        result = ""
        while True:
            value = self.try_consume(LexKind.CHAR)
            if value is None:
                value = self.try_consume(LexKind.ESCAPED_CHAR)
            if value is None:
                return result
            result += value


class _Parser:
    def __init__(self, template: str, options: Options) -> None:
        self.options = options
        self.stream = _LexStream(lex(template))
        self.tokens: List[Token] = []
        self.names: Set[str] = set()
        self.position = 0
        self.path = ""

    def parse(self) -> Tuple[Token, ...]:
        stream = self.stream
        while not stream.done:
            char = stream.try_consume(LexKind.CHAR)
            index = stream.peek().index
            name = stream.try_consume(LexKind.NAME)
            pattern = stream.try_consume(LexKind.PATTERN)
            if name is not None or pattern is not None:
                prefix = self._prefix(char)
                modifier = stream.try_modifier()
                self._add_parameter(name, pattern, prefix, "", modifier, index)
                continue

            splat = stream.try_consume(LexKind.SPLAT)
            if splat is not None or stream.try_consume(LexKind.WILDCARD) is not None:
                self._add_parameter(
                    splat,
                    None if splat else WILDCARD_PATTERN,
                    self._prefix(char),
                    "",
                    Modifier.ZERO_OR_MORE,
                    index,
                )
                continue

            value = char if char is not None else stream.try_consume(LexKind.ESCAPED_CHAR)
            if value is not None:
                self.path += value
                continue

            self._flush()
            if stream.try_consume(LexKind.OPEN) is not None:
                self._parse_group()
                continue

            stream.must_consume(LexKind.END)

        return tuple(self.tokens)

    def _parse_group(self) -> None:
        stream = self.stream
        prefix = stream.consume_text()
        index = stream.peek().index
        name = stream.try_consume(LexKind.NAME)
        pattern = stream.try_consume(LexKind.PATTERN)
        suffix = stream.consume_text()
        stream.must_consume(LexKind.CLOSE)
        modifier = stream.try_modifier()

        if name is None and pattern is None:
            self.tokens.append(Parameter(None, "", modifier, prefix, suffix))
        else:
            self._add_parameter(name, pattern, prefix, suffix, modifier, index)

    def _prefix(self, char: Optional[str]) -> str:
        if char is None:
            return ""
        if char in self.options.prefixes:
            return char
        self.path += char
        return ""

    def _add_parameter(
        self,
        name: Optional[str],
        pattern: Optional[str],
        prefix: str,
        suffix: str,
        modifier: Modifier,
        index: int,
    ) -> None:
        key: Name
        if name is None:
            key = self.position
            self.position += 1
        elif name in self.names:
            raise DuplicateParameterName(name, index)
        else:
            self.names.add(name)
            key = name

        self._flush()
        self.tokens.append(
            Parameter(
                key,
                pattern or self.options.default_pattern,
                modifier,
                prefix,
                suffix,
            )
        )

    def _flush(self) -> None:
        if self.path:
            self.tokens.append(Literal(self.path))
            self.path = ""


def parse(template: str, options: Optional[Options] = None) -> Tuple[Token, ...]:
    """Parse a route template into an immutable token sequence.

    :raise ParseError: if the template is malformed
    """
    tokens = _Parser(template, options or Options()).parse()
    log.debug("Parsed %r into %d tokens", template, len(tokens))
    return tokens
