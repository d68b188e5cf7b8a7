"""
Constants for the command-line dispatch framework.
"""

# Process exit statuses
STATUS_OK = 0
STATUS_ERR = 1

# Prefix every option token must start with
FLAG_PREFIX = "--"

# Separator between option name and value
FLAG_VALUE_SEPARATOR = "="

# Optional leading token separating program arguments from the command
CMD_SEPARATOR = "--"

# Built-in help command
HELP_COMMAND_ID = "help"
HELP_WRAP_WIDTH = 80
HELP_SEPARATOR = "_________"

# Logger name used by the dispatcher when none is injected
LOGGER_NAME = "/appcommon/cli"
