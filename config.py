"""Configuration defaults for scriptdeck."""


class Config:
    """Configuration for the launcher.

    All defaults are centralized here. Access config values directly via Config.XXX.
    Nothing is read from disk or the environment; components receive these values
    through their arguments so tests can override them per call.
    """

    # Manifest discovery
    MANIFEST_NAME = "package.json"
    EXCLUDE_DIRS = ("node_modules",)
    MAX_DEPTH = 4

    # Execution
    # Script names are re-dispatched through the runner, e.g. "npm run build"
    SCRIPT_RUNNER = "npm"
    SHELL = "sh"

    # Display
    ROOT_LABEL = "root"
    MENU_PAGE_SIZE = 15
    MENU_PROMPT = "Choose a command to execute:"

    # Logging Configuration
    # Logging is only enabled via --verbose (see utils.logger)
    LOG_LEVEL = "DEBUG"

    # TUI Configuration
    TUI_THEME = "dark"  # "dark" or "light"
