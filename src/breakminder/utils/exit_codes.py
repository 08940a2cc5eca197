"""
Exit codes for breakminder.

Semantic exit codes so scripts wrapping the CLI can tell what went wrong.
"""

# Success
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or validation error
ERROR_INVALID_ARGS = 2

# Preferences file unreadable or unwritable
ERROR_CONFIG = 3

# Autostart registration failed
ERROR_LOGIN_ITEM = 4


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_GENERAL: "ERROR_GENERAL",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_CONFIG: "ERROR_CONFIG",
        ERROR_LOGIN_ITEM: "ERROR_LOGIN_ITEM",
    }
    return code_names.get(code, f"UNKNOWN({code})")

