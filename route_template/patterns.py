"""Regex patterns and constants for template parsing and pattern building."""

import re

DEFAULT_DELIMITER = "/"
DEFAULT_PREFIXES = "./"

# Group holding the part of the path left over after the template
TRAILING_GROUP = "trailing"

WILDCARD_PATTERN = ".*"
MODIFIERS = "?*+"

# Pattern matching expressions
name_expr = re.compile(r"[a-zA-Z0-9_]+")
