"""
Sorter configuration.
"""

# Extensions picked up when sorting a whole directory
SOURCE_EXTENSIONS = {".rb"}

# Source files are decoded strictly with this encoding
DEFAULT_ENCODING = "utf-8"

# Supported sort modes
SORT_MODES = {
    "grouped": "Group declarations by kind, keep leading comments, blank line between groups",
    "simple": "Legacy mode: require/require_relative/include as one sorted block",
}

# Mode used by the CLI and the executor when none is given
DEFAULT_MODE = "grouped"


def get_mode_description(mode: str) -> str:
    """
    Get the description for a sort mode.

    Args:
        mode: Mode name (grouped, simple).

    Returns:
        Human readable description; unknown modes fall back to the default.
    """
    return SORT_MODES.get(mode, SORT_MODES[DEFAULT_MODE])
