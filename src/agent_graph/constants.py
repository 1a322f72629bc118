"""Reserved node names."""

START = "start"
"""Virtual entry node; its successor receives the invocation input."""

END = "end"
"""Virtual exit node; reaching it finishes the run."""

RESERVED_NAMES = frozenset({START, END})
