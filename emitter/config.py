# emitter/config.py
# Configures library-wide behaviour via the environment (and an optional .env file).  Nothing here is
# required; the defaults keep the emitter quiet.
#
# Importing the package loads the .env found from the working directory upwards into os.environ.
# Variables already set in the environment always win.

import logging
import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True), override=False)

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


LOG_LEVEL                       =       os.getenv("EMITTER_LOG_LEVEL",             "WARNING").upper()
LOG_FORMAT                      =       "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
TRACE_DISPATCH                  = _env_flag("EMITTER_TRACE_DISPATCH")


def setup_logging(level: Optional[str] = None) -> None:
    """
    Route emitter logs to stderr.  The library never calls this itself;
    applications opt in, optionally overriding EMITTER_LOG_LEVEL.
    """
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING),
        format=LOG_FORMAT
    )
