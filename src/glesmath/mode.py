"""
Operation Mode Registry
=======================
Process-wide switch between DEBUG and RELEASE behaviour.

The mode only gates diagnostics: in DEBUG, Vector.to_array() checks whether
its cached array was altered by the caller and logs a warning. Arithmetic is
identical in both modes.

The registry is an explicit object so it can be injected where diagnostics are
needed (see Vector.to_array(registry=...)). DEFAULT_REGISTRY is the shared
process-wide instance; it starts in DEBUG unless GLESMATH_MODE says otherwise.

Thread safety:
    Reads and writes of the current mode are serialized by a lock, so a mode
    set on one thread is observed whole on any other.
"""
from __future__ import annotations

import logging
import threading
from enum import StrEnum
from typing import Any, Mapping, Optional

from glesmath import config

logger = logging.getLogger(__name__)


class Mode(StrEnum):
    DEBUG = "debug"
    RELEASE = "release"


# OpenGL ES style constant names
MODE_DEBUG = Mode.DEBUG
MODE_RELEASE = Mode.RELEASE


def parse_mode(value: Any) -> Optional[Mode]:
    """Return the Mode matching `value`, or None if it is not a valid mode."""
    if isinstance(value, Mode):
        return value
    if isinstance(value, str):
        try:
            return Mode(value)
        except ValueError:
            return None
    return None


def get_initial_mode(environ: Optional[Mapping[str, str]] = None) -> Mode:
    """
    Resolve the mode a new registry starts in from the environment.

    An unknown value falls back to DEBUG with a warning, the same policy as
    ModeRegistry.set_mode().
    """
    raw = config.read_mode_setting(environ)
    mode = parse_mode(raw)
    if mode is None:
        logger.warning(
            f"Unknown mode '{raw}' in {config.MODE_ENV_VAR}. Defaulting to {Mode.DEBUG.value}."
        )
        return Mode.DEBUG
    return mode


class ModeRegistry:
    """
    Holds the current operation mode.

    Invalid values never raise: they are replaced by Mode.DEBUG and a warning
    is logged.
    """

    def __init__(self, mode: Optional[Mode | str] = None) -> None:
        """
        Args:
            mode: Initial mode. None resolves it from the environment.
        """
        self._lock = threading.Lock()
        if mode is None:
            self._mode = get_initial_mode()
        else:
            self._mode = Mode.DEBUG
            self.set_mode(mode)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(mode={self.mode.value!r})"

    @property
    def mode(self) -> Mode:
        with self._lock:
            return self._mode

    def set_mode(self, value: Any) -> Mode:
        """
        Set the current mode.

        Args:
            value: Mode.DEBUG, Mode.RELEASE or their string values.

        Returns:
            The mode actually applied (Mode.DEBUG when `value` is invalid).
        """
        new_mode = parse_mode(value)
        if new_mode is None:
            logger.warning(f"Unknown mode {value!r}. Defaulting to {Mode.DEBUG.value}.")
            new_mode = Mode.DEBUG

        with self._lock:
            previous = self._mode
            self._mode = new_mode

        if previous != new_mode:
            logger.debug(f"Mode changed: {previous.value} -> {new_mode.value}")
        return new_mode

    def is_debug_mode(self) -> bool:
        return self.mode == Mode.DEBUG


DEFAULT_REGISTRY = ModeRegistry()


def set_mode(value: Any) -> Mode:
    """Set the mode of the process-wide DEFAULT_REGISTRY."""
    return DEFAULT_REGISTRY.set_mode(value)


def get_mode() -> Mode:
    return DEFAULT_REGISTRY.mode


def is_debug_mode() -> bool:
    """Whether the process-wide DEFAULT_REGISTRY is in DEBUG mode."""
    return DEFAULT_REGISTRY.is_debug_mode()
