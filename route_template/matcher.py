"""Match concrete paths against a built template pattern."""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, NamedTuple, Optional, Tuple, Union

from route_template.patterns import TRAILING_GROUP
from route_template.routing import PathPattern, PatternEngine, regex_engine
from route_template.types import Key, Name, Options


class Capture(NamedTuple):
    """One captured group; ``key`` is None for the whole match."""

    key: Optional[Key]
    value: Optional[str]


@dataclass(frozen=True)
class MatchResult:
    captures: Tuple[Capture, ...]
    path: str
    index: int = 0
    trailing: Optional[str] = None
    params: Dict[Name, Union[str, List[str]]] = field(default_factory=dict)

    def __getitem__(self, name: Name) -> Any:
        return self.params[name]


class Matcher:
    """Test paths against a template pattern and extract parameter values."""

    def __init__(
        self,
        path_pattern: PathPattern,
        options: Optional[Options] = None,
        engine: PatternEngine = regex_engine,
    ) -> None:
        self._path_pattern = path_pattern
        self._options = options or Options(
            sensitive=path_pattern.sensitive, delimiter=path_pattern.delimiter
        )
        self._compiled = path_pattern.compile(engine)

    @property
    def pattern(self) -> str:
        return self._path_pattern.pattern

    @property
    def keys(self) -> Tuple[Key, ...]:
        return self._path_pattern.keys

    def match(self, path: str) -> Optional[MatchResult]:
        """Return the captures for ``path``, or None when it does not match."""
        found = self._compiled.search(path)
        if found is None:
            return None

        decode = self._options.decode
        whole = found.group(0)
        captures = [Capture(None, whole)]
        params: Dict[Name, Union[str, List[str]]] = {}
        for group, key in enumerate(self.keys, start=1):
            raw = found.group(group)
            if raw is None:
                captures.append(Capture(key, None))
                continue
            captures.append(Capture(key, decode(raw)))
            if key.modifier.repeat:
                params[key.name] = [decode(part) for part in self._split(raw, key)]
            else:
                params[key.name] = decode(raw)

        trailing = found.groupdict().get(TRAILING_GROUP)
        path_end = len(whole) - len(trailing) if trailing else len(whole)
        return MatchResult(
            captures=tuple(captures),
            path=whole[:path_end],
            index=found.start(),
            trailing=trailing,
            params=params,
        )

    def _split(self, value: str, key: Key) -> List[str]:
        separator = key.suffix + key.prefix
        if separator:
            return value.split(separator)
        return re.split(self._options.delimiter_re, value)
