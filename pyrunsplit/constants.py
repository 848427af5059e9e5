"""Constants for pyrunsplit - mode names and program metadata."""

# Program metadata
PROGRAM_NAME = "pyrunsplit"

# Boundary placement modes
# "before": the matched element opens the following run
# "after": the matched element closes the current run
MODE_BEFORE = "before"
MODE_AFTER = "after"
MODES = (MODE_BEFORE, MODE_AFTER)
