"""
FILE: tasklist/core/constants.py
PURPOSE: Constants used throughout the application
EXPORTS:
  - PROMPT: Text written before each input line
  - DATE_FORMAT: strftime/strptime format for deadlines (dd.mm.yyyy)
  - TASK_LINE_FORMAT: Layout of one task line in grouped views
  - HELP_LINES: Usage summary printed by the help command
  - Command keywords (CMD_*)
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Single source of truth for keywords shared by parser, dispatcher and completer
"""

PROMPT = "> "

# Deadlines are calendar days, shown zero-padded as day.month.year
DATE_FORMAT = "%d.%m.%Y"

TASK_LINE_FORMAT = "    [{mark}] {id}: {description}"

# Command keywords
CMD_VIEW_BY_PROJECT = "view by project"
CMD_VIEW_BY_DEADLINE = "view by deadline"
CMD_ADD_PROJECT = "add project"
CMD_ADD_TASK = "add task"
CMD_CHECK = "check"
CMD_UNCHECK = "uncheck"
CMD_DEADLINE = "deadline"
CMD_TODAY = "today"
CMD_ID = "id"
CMD_DELETE = "delete"
CMD_HELP = "help"
CMD_QUIT = "quit"

# Keywords made of several words, longest first so prefixes don't shadow them
MULTI_WORD_COMMANDS = (
    CMD_VIEW_BY_DEADLINE,
    CMD_VIEW_BY_PROJECT,
    CMD_ADD_PROJECT,
    CMD_ADD_TASK,
)

# Older spellings still accepted
COMMAND_ALIASES = {
    "show": CMD_VIEW_BY_PROJECT,
    "exit": CMD_QUIT,
}

HELP_LINES = (
    "Commands:",
    "  view by project",
    "  view by deadline",
    "  add project <project name>",
    "  add task <project name> <task description>",
    "  check <task ID>",
    "  uncheck <task ID>",
    "  deadline <task ID> <dd.mm.yyyy>",
    "  today",
    "  id <task ID> <new task ID>",
    "  delete <task ID>",
    "  help",
    "  quit",
)
