"""Errors raised while parsing templates and compiling paths."""

from typing import Any, Optional


class RouteTemplateError(Exception):
    """Generic base exception for all route template errors."""


class ParseError(RouteTemplateError, ValueError):
    """Failure to parse a template."""

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.index = index


class UnbalancedGroup(ParseError):
    """A pattern or brace group is left open, or closed without opening."""


class DuplicateParameterName(ParseError):
    """The same parameter name is declared twice."""

    def __init__(self, name: str, index: Optional[int] = None) -> None:
        super().__init__(f'Duplicate parameter name "{name}" at {index}', index)
        self.name = name


class DanglingModifier(ParseError):
    """A modifier does not follow a parameter that can take it."""


class MissingParameterName(ParseError):
    """A ``:`` is not followed by a parameter name."""


class InvalidPattern(ParseError):
    """A custom pattern cannot be used as a parameter pattern."""


class UnexpectedToken(ParseError):
    """Any other token found where the grammar does not allow it."""


class CompileError(RouteTemplateError, ValueError):
    """Failure to build a path from parameter values."""

    def __init__(self, message: str, name: Any) -> None:
        super().__init__(message)
        self.name = name


class MissingParameter(CompileError):
    """A required parameter has no value."""

    def __init__(self, name: Any, message: Optional[str] = None) -> None:
        super().__init__(message or f'Missing value for "{name}"', name)


class EmptyRepeatingValue(MissingParameter):
    """A parameter requiring one or more values got an empty sequence."""

    def __init__(self, name: Any) -> None:
        super().__init__(name, f'Expected "{name}" to not be empty')


class InvalidParameterValue(CompileError):
    """A value has the wrong type or does not match the parameter pattern."""

    def __init__(self, name: Any, value: Any, message: Optional[str] = None) -> None:
        super().__init__(message or f'Invalid value for "{name}": {value!r}', name)
        self.value = value
