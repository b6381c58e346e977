from pathlib import Path

# BINARIES
QUERY_BIN_NAME = "_kn"
SHELL_FUNCTION_NAME = "kn"
INTERACTIVE_SHELL_FUNCTION_NAME = "kni"

# SUBCOMMANDS
CMD_QUERY = "query"
CMD_INIT = "init"
CMD_INTERACTIVE = "interactive"

# ARGS
ARG_ABBR = "abbr"
ARG_SHELL = "shell"
ARG_TMP_FILE = "tmp_file"
ARG_EXCLUDE = "--exclude"
ARG_EXCLUDE_OLD_PWD = "--exclude-old-pwd"
ARG_FIRST_DEPTH = "--first-depth"
ARG_NEXT_DEPTH = "--next-depth"
ARG_LIST = "--list"
ARG_CONFIG = "--config"
ARG_VERBOSE = "--verbose"

# SYMBOLS
WILDCARD_SYMBOL = '-'
HOME_SYMBOL = '~'
CURRENT_DIR = '.'
PARENT_DIR = '..'
PATH_SEPARATOR = '/'
ELLIPSIS_PREFIX = '.../'

# CONFIG
ENV_KN_CONFIG = "KN_CONFIG"
ENV_XDG_CONFIG_HOME = "XDG_CONFIG_HOME"
DEFAULT_CONFIG_DIR = Path.home() / ".config"
CONFIG_RELATIVE_PATH = Path("kn") / "config.yaml"

# SEARCH DEFAULTS
DEFAULT_FIRST_DEPTH = 0
DEFAULT_NEXT_DEPTH = 0
DEFAULT_FOLLOW_SYMLINKS = True
DEFAULT_ALLOW_LAST_WILDCARD = False
DEFAULT_MAX_SUGGESTIONS = 100
DEFAULT_PAGE_SIZE = 8

# EXIT CODES
EXIT_OK = 0
EXIT_USER_ERROR = 1
EXIT_INTERNAL_ERROR = 2
