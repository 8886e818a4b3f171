"""Build concrete paths by substituting values into template tokens."""

import logging
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from route_template.exceptions import (
    CompileError,
    EmptyRepeatingValue,
    InvalidParameterValue,
    MissingParameter,
)
from route_template.routing import CompiledPattern, PatternEngine, regex_engine
from route_template.types import Literal, Options, Parameter, Token

log = logging.getLogger(__name__)

_SCALAR_TYPES = (str, int, float)


class Compiler:
    """Reverse of the matcher: turns parameter values into a path.

    The instance is the builder function; call it with a mapping of parameter
    name (or positional index) to value. Repeating parameters take a list or
    tuple of values.
    """

    def __init__(
        self,
        tokens: Tuple[Token, ...],
        options: Optional[Options] = None,
        engine: PatternEngine = regex_engine,
    ) -> None:
        self._tokens = tokens
        self._options = options or Options()
        self._validators: Tuple[Optional[CompiledPattern], ...] = tuple(
            engine(rf"^(?:{token.pattern})\Z", self._options.sensitive)
            if isinstance(token, Parameter) and not token.is_static
            else None
            for token in tokens
        )

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    def __call__(self, params: Optional[Mapping[Any, Any]] = None) -> str:
        """Return the path for ``params``.

        :raise CompileError: if a value is missing or invalid
        """
        params = params or {}
        try:
            return "".join(
                self._render(token, index, params)
                for index, token in enumerate(self._tokens)
            )
        except CompileError as err:
            log.debug("Failed to compile path: %s", err)
            raise

    def _render(self, token: Token, index: int, params: Mapping[Any, Any]) -> str:
        if isinstance(token, Literal):
            return token.text
        if token.is_static:
            return "" if token.modifier.optional else token.prefix + token.suffix

        value = params.get(token.name)
        if token.modifier.repeat:
            return self._render_repeat(token, index, value)

        if value is None:
            if token.modifier.optional:
                return ""
            raise MissingParameter(token.name)
        if isinstance(value, (list, tuple)):
            raise InvalidParameterValue(
                token.name,
                value,
                f'Expected "{token.name}" to not repeat, but got {type(value).__name__}',
            )
        return token.prefix + self._segment(token, index, value) + token.suffix

    def _render_repeat(self, token: Parameter, index: int, value: Any) -> str:
        values: Sequence[Any]
        if value is None:
            values = []
        elif isinstance(value, (list, tuple)):
            values = value
        else:
            values = [value]

        if not values:
            if token.modifier.optional:
                return ""
            if value is None:
                raise MissingParameter(token.name)
            raise EmptyRepeatingValue(token.name)

        segments: List[str] = [self._segment(token, index, item) for item in values]
        if token.prefix or token.suffix:
            return "".join(
                f"{token.prefix}{segment}{token.suffix}" for segment in segments
            )
        return self._options.delimiter[0].join(segments)

    def _segment(self, token: Parameter, index: int, value: Any) -> str:
        if isinstance(value, bool) or not isinstance(value, _SCALAR_TYPES):
            raise InvalidParameterValue(
                token.name,
                value,
                f'Expected "{token.name}" to be a string or a number, '
                f"got {type(value).__name__}",
            )

        segment = self._options.encode(str(value))
        validator = self._validators[index]
        if self._options.validate and validator is not None:
            if validator.search(segment) is None:
                raise InvalidParameterValue(
                    token.name,
                    segment,
                    f'Expected "{token.name}" to match "{token.pattern}", '
                    f'but got "{segment}"',
                )
        return segment


def compiler(
    tokens: Tuple[Token, ...],
    options: Optional[Options] = None,
    engine: PatternEngine = regex_engine,
) -> Compiler:
    """Create the path builder for a token sequence."""
    return Compiler(tokens, options, engine)
