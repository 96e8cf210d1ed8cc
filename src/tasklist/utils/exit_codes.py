"""Process exit codes returned by tasklist commands."""

SUCCESS = 0

# Anything not covered below, including unexpected exceptions
ERROR_GENERAL = 1

# Bad option values, blank titles, malformed dates, unknown commands
ERROR_INVALID_ARGS = 2

# No task at the requested position, unknown config key
ERROR_NOT_FOUND = 5

# StorageError from the task repository
ERROR_STORAGE = 7
