"""
Environment lookups shared by the function components
"""

import os

from functions.shared.errors import MissingConfiguration


def require_env(name: str, logger=None) -> str:
    """
    Read a required environment variable.

    An empty value counts as set; only an absent variable is an error.

    Raises:
        MissingConfiguration: if the variable is not present
    """
    try:
        return os.environ[name]
    except KeyError:
        err = MissingConfiguration(name)
        if logger is not None:
            logger.error(str(err))
        raise err from None


def get_bool(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "y"}
