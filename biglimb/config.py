from __future__ import annotations

import os
from typing import Optional

_TRUTHY = {"1", "true", "yes", "on"}


def log_level(explicit: Optional[str] = None) -> str:
    """Resolve the log level for the command line entry point.

    Order: explicit argument -> env BIGLIMB_LOG_LEVEL -> "WARNING"
    """
    if explicit:
        return explicit.upper()
    env = os.getenv("BIGLIMB_LOG_LEVEL")
    if env:
        return env.upper()
    return "WARNING"


def report_on_success(explicit: Optional[bool] = None) -> bool:
    """Whether self-check groups log a line when they pass.

    Order: explicit argument -> env BIGLIMB_REPORT_ON_SUCCESS -> False
    """
    if explicit is not None:
        return explicit
    env = os.getenv("BIGLIMB_REPORT_ON_SUCCESS")
    if env:
        return env.strip().lower() in _TRUTHY
    return False
