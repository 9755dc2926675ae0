from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed tokens of the tree text format and the application
identity used by the configuration and logging layers.
"""

APP_NAME = "treeify"
APP_VERSION = "0.1.0"

# -----------------------------------------------------------------------------
# TEXT FORMAT
# -----------------------------------------------------------------------------

# Leading character of every rendered line
LINE_MARKER = "|"

# Repeated once per depth level
INDENT_UNIT = "---"

# Suffix appended to directory display names
DIR_SUFFIX = "/"

LINE_TERMINATOR = "\n"

# Entries whose name starts with this are hidden
HIDDEN_MARKER = "."

# Depth assigned to the immediate entries of the root
INIT_DEPTH = 1
