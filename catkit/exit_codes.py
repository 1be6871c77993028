"""Exit status codes used by catkit commands and entry points."""

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# Process has no executor bound to its command name
EXIT_COMMAND_NOT_FOUND = 127

# 128 + SIGINT
EXIT_INTERRUPTED = 130
