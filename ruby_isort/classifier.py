"""
Line classification for Ruby dependency declarations.

Classification is purely textual: each line is tested against a fixed,
ordered table of prefix patterns. There is no awareness of classes,
modules or conditionals, so an indented declaration never matches.
"""

import re
from enum import Enum


class DeclarationKind(Enum):
    """Declaration kinds, in output-priority order."""
    REQUIRE = "require"
    REQUIRE_RELATIVE = "require_relative"
    INCLUDE = "include"
    EXTEND = "extend"
    AUTOLOAD = "autoload"
    USING = "using"

    @property
    def keyword(self) -> str:
        return self.value


# Anchored at column 0: leading whitespace means "nested", never matched
DECLARATION_PATTERNS = tuple(
    (kind, re.compile(rf"^{kind.keyword}\s")) for kind in DeclarationKind
)

# Legacy simple mode: three keywords, indentation allowed
SIMPLE_PATTERN = re.compile(r"^\s*(require|require_relative|include)\s")

COMMENT_MARKER = "#"


def classify(line: str) -> DeclarationKind | None:
    """
    Return the declaration kind a line matches, or None.

    Args:
        line: A single source line without its terminator.

    Returns:
        The first kind (in priority order) whose pattern matches.
    """
    for kind, pattern in DECLARATION_PATTERNS:
        if pattern.match(line):
            return kind
    return None


def is_comment_or_blank(line: str) -> bool:
    """Check if a line is empty/whitespace or a line comment."""
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_MARKER)


def is_simple_declaration(line: str) -> bool:
    return SIMPLE_PATTERN.match(line) is not None
