"""Helpers to decide whether control sequences should be written to a stream.

Sequences only make sense when the stream is attached to a terminal that will
interpret them. Written into a file or a pipe they become garbage, so every check
here errs on the side of `False`.
"""

from __future__ import annotations

import logging
import os
from abc import ABC, abstractmethod
from enum import Enum

from .core import InvalidArgument

__all__ = [
    "Stream",
    "TerminalProbe",
    "PosixProbe",
    "WindowsProbe",
    "get_probe",
    "get_preference",
    "is_supported",
    "should_use",
    "enable_virtual_terminal_processing",
    "fmt_supported_stdout",
    "fmt_supported_stderr",
    "use_fmt_stdout",
    "use_fmt_stderr",
]

log = logging.getLogger(__name__)

# Win32 API constants
ENABLE_PROCESSED_OUTPUT = 0x0001
ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004
STD_OUTPUT_HANDLE = -11
STD_ERROR_HANDLE = -12
INVALID_HANDLE_VALUE = -1

PREFERENCE_VALUES = ("always", "never", "auto")


class Stream(Enum):
    """The standard streams, valued by their file descriptor."""

    STDIN = 0
    """Never eligible for formatting."""

    STDOUT = 1
    STDERR = 2


class TerminalProbe(ABC):
    """The platform-specific answer to "can I format this stream?"."""

    @abstractmethod
    def is_supported(self, stream: Stream) -> bool:
        """Returns whether sequences written to `stream` will be interpreted."""

    @abstractmethod
    def enable_virtual_terminal_processing(self) -> int:
        """Asks the console to start interpreting control sequences.

        Returns:
            0 on success, otherwise a platform error code. Failure is never fatal;
            the caller should fall back to plain output.
        """


class PosixProbe(TerminalProbe):
    """Probe for POSIX systems, where any TTY interprets sequences."""

    def is_supported(self, stream: Stream) -> bool:
        if stream is Stream.STDIN:
            return False

        try:
            return os.isatty(stream.value)

        except OSError as error:
            log.debug("isatty(%d) failed: %s", stream.value, error)
            return False

    def enable_virtual_terminal_processing(self) -> int:
        return 0


class WindowsProbe(TerminalProbe):
    """Probe for Windows consoles.

    A console only interprets sequences once `ENABLE_VIRTUAL_TERMINAL_PROCESSING`
    is set on its mode, so a stream is supported only when that flag is on. Call
    `enable_virtual_terminal_processing` first to turn it on for this process.
    """

    _handle_ids = {
        Stream.STDOUT: STD_OUTPUT_HANDLE,
        Stream.STDERR: STD_ERROR_HANDLE,
    }

    def __init__(self) -> None:
        import ctypes
        from ctypes import wintypes

        self._ctypes = ctypes
        self._dword = wintypes.DWORD
        # `windll` only exists on Windows.
        self._kernel32 = ctypes.windll.kernel32  # type: ignore

    def _get_mode(self, stream: Stream) -> tuple[int, int] | None:
        """Returns the (handle, console mode) of the stream, or None on failure."""

        try:
            handle = self._kernel32.GetStdHandle(self._handle_ids[stream])

            if handle in (None, 0, INVALID_HANDLE_VALUE):
                log.debug("GetStdHandle failed for %s", stream.name)
                return None

            mode = self._dword(0)

            # Fails when the handle is redirected to a file or a pipe.
            if not self._kernel32.GetConsoleMode(handle, self._ctypes.byref(mode)):
                log.debug(
                    "GetConsoleMode failed for %s: error %d",
                    stream.name,
                    self._kernel32.GetLastError(),
                )
                return None

        except OSError as error:
            log.debug("Console query failed for %s: %s", stream.name, error)
            return None

        return handle, mode.value

    def is_supported(self, stream: Stream) -> bool:
        if stream is Stream.STDIN:
            return False

        result = self._get_mode(stream)

        if result is None:
            return False

        return bool(result[1] & ENABLE_VIRTUAL_TERMINAL_PROCESSING)

    def enable_virtual_terminal_processing(self) -> int:
        for stream in self._handle_ids:
            result = self._get_mode(stream)

            # Redirected streams have nothing to enable.
            if result is None:
                continue

            handle, mode = result
            new_mode = (
                mode | ENABLE_PROCESSED_OUTPUT | ENABLE_VIRTUAL_TERMINAL_PROCESSING
            )

            if not self._kernel32.SetConsoleMode(handle, new_mode):
                error = int(self._kernel32.GetLastError())
                log.debug("SetConsoleMode failed for %s: error %d", stream.name, error)

                return error

        return 0


def get_probe() -> TerminalProbe:
    """Returns the probe for the running platform."""

    if os.name == "nt":
        return WindowsProbe()

    return PosixProbe()


default_probe = get_probe()


def get_preference(default: bool = True) -> bool:
    """Gets the user's formatting preference from the shell environment.

    `$TERMCTRL_COLOR` may be one of `always`, `never` or `auto`; the first two take
    priority over everything. Otherwise a set `$NO_COLOR` turns formatting off.

    Args:
        default: Returned when the environment expresses no preference.

    Raises:
        InvalidArgument: `$TERMCTRL_COLOR` holds an unknown value.
    """

    setting = os.getenv("TERMCTRL_COLOR")

    if setting is not None:
        setting = setting.strip().lower()

        if setting not in PREFERENCE_VALUES:
            raise InvalidArgument(
                f"$TERMCTRL_COLOR must be one of {PREFERENCE_VALUES}, got {setting!r}."
            )

        if setting != "auto":
            return setting == "always"

    if os.getenv("NO_COLOR") is not None:
        return False

    return default


def is_supported(stream: Stream, probe: TerminalProbe | None = None) -> bool:
    """Returns whether sequences are supported on the stream right now.

    Args:
        stream: The stream to check. `Stream.STDIN` is never supported.
        probe: The probe to ask. Defaults to the one selected for this platform.
    """

    if stream is Stream.STDIN:
        return False

    return (probe or default_probe).is_supported(stream)


def should_use(
    stream: Stream, preference: bool, probe: TerminalProbe | None = None
) -> bool:
    """Combines the user's preference with the stream's support.

    The stream is not probed at all when `preference` is false.
    """

    if not preference:
        return False

    return is_supported(stream, probe=probe)


def enable_virtual_terminal_processing(probe: TerminalProbe | None = None) -> int:
    """Turns on sequence interpretation for this process's console, if needed.

    Returns:
        0 on success, otherwise the platform's error code.
    """

    return (probe or default_probe).enable_virtual_terminal_processing()


def fmt_supported_stdout() -> bool:
    """Are sequences supported on stdout?"""

    return is_supported(Stream.STDOUT)


def fmt_supported_stderr() -> bool:
    """Are sequences supported on stderr?"""

    return is_supported(Stream.STDERR)


def use_fmt_stdout(preference: bool) -> bool:
    """Should I use formatting on stdout?"""

    return should_use(Stream.STDOUT, preference)


def use_fmt_stderr(preference: bool) -> bool:
    """Should I use formatting on stderr?"""

    return should_use(Stream.STDERR, preference)
