"""Token model shared by the parser, pattern builder and compiler."""

import re
from dataclasses import dataclass, fields
from enum import Enum
from typing import Callable, Optional, Union

from route_template.patterns import DEFAULT_DELIMITER, DEFAULT_PREFIXES

Name = Union[str, int]


def _identity(value: str) -> str:
    return value


class Modifier(Enum):
    """Repetition marker attached to a parameter."""

    NONE = ""
    OPTIONAL = "?"
    ZERO_OR_MORE = "*"
    ONE_OR_MORE = "+"

    @property
    def optional(self) -> bool:
        """Whether the parameter may be left out."""
        return self in (Modifier.OPTIONAL, Modifier.ZERO_OR_MORE)

    @property
    def repeat(self) -> bool:
        """Whether the parameter takes a sequence of values."""
        return self in (Modifier.ZERO_OR_MORE, Modifier.ONE_OR_MORE)


@dataclass(frozen=True)
class Key:
    name: Name
    pattern: str
    modifier: Modifier = Modifier.NONE
    prefix: str = ""
    suffix: str = ""


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Parameter:
    name: Optional[Name]
    pattern: str
    modifier: Modifier = Modifier.NONE
    prefix: str = ""
    suffix: str = ""

    @property
    def is_static(self) -> bool:
        """Brace groups without a parameter only carry literal text."""
        return not self.pattern

    @property
    def key(self) -> Key:
        """Derive the capture key for this parameter."""
        if self.is_static:
            raise ValueError("Static groups do not capture a value")
        return Key(self.name, self.pattern, self.modifier, self.prefix, self.suffix)


Token = Union[Literal, Parameter]


@dataclass(frozen=True)
class Options:
    """Settings shared by every stage built from one template.

    :param sensitive: match literals case sensitively
    :param strict: disallow the optional trailing delimiter
    :param start: anchor the pattern at the start of the path
    :param end: anchor the pattern at the end of the path
    :param delimiter: segment separator characters
    :param ends_with: extra characters accepted as the end of a match
    :param encode: applied to every value written by the compiler
    :param decode: applied to every value captured by the matcher
    :param prefixes: characters captured as a parameter prefix
    :param validate: check compiled values against the parameter pattern
    """

    sensitive: bool = False
    strict: bool = False
    start: bool = True
    end: bool = True
    delimiter: str = DEFAULT_DELIMITER
    ends_with: str = ""
    encode: Callable[[str], str] = _identity
    decode: Callable[[str], str] = _identity
    prefixes: str = DEFAULT_PREFIXES
    validate: bool = True

    def __post_init__(self) -> None:
        if not self.delimiter:
            raise ValueError("delimiter must contain at least one character")

    @property
    def delimiter_re(self) -> str:
        """Character class matching any delimiter."""
        return f"[{re.escape(self.delimiter)}]"

    @property
    def default_pattern(self) -> str:
        """Pattern for parameters declared without one."""
        return f"[^{re.escape(self.delimiter)}]+?"


OPTION_FIELDS = frozenset(field.name for field in fields(Options))
