"""
Configuration & Global Constants
================================
This module serves as the central registry for library-wide constants.

Why is this file needed?
------------------------
1. Precision: Every vector component is stored as a 32-bit float, the same
   width OpenGL ES expects in its float buffers. The dtype is declared once here.
2. Deployment: The initial diagnostic mode can be chosen from the environment
   (e.g. a release build exports GLESMATH_MODE=release) without code changes.

Exports:
    COMPONENT_DTYPE (type): numpy scalar type of every component.
    MODE_ENV_VAR (str): Environment variable holding the initial mode.
    DEFAULT_MODE_NAME (str): Mode name used when nothing else is configured.
"""
import os
from typing import Mapping, Optional

import numpy as np

# Global Constants
COMPONENT_DTYPE = np.float32
MODE_ENV_VAR: str = "GLESMATH_MODE"
DEFAULT_MODE_NAME: str = "debug"


def read_mode_setting(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Get the raw mode name configured in the environment.

    Args:
        environ: Mapping to read MODE_ENV_VAR from. Defaults to os.environ.

    Returns:
        The stripped, lower-cased value, or DEFAULT_MODE_NAME if unset or blank.
        The value is not validated here.
    """
    env = os.environ if environ is None else environ
    raw = env.get(MODE_ENV_VAR, "").strip().lower()
    return raw or DEFAULT_MODE_NAME
