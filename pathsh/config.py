# pathsh configuration
PROMPT = "pathsh> "
ERROR_MESSAGE = "An error has occurred\n"

HISTORY_CAPACITY = 50  # Only the most recent lines are kept
MAX_ARGS = 4  # Arguments after the program name; execl() mode is shaped around it
MAX_TOKENS = MAX_ARGS + 2  # Program name + arguments + one slot for ">"

PATH_SEPARATOR = ":"
REDIRECT_TOKEN = ">"
WHITESPACE = " \t\n\r"

EXEC_FAILURE_STATUS = 1

DEFAULT_BANNER = "**By default, execl() will be used**\n"
EXECL_BANNER = "**Based on your choice, execl() will be used**\n"
EXECV_BANNER = "**Based on your choice, execv() will be used**\n"
