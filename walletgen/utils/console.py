"""Console streams used by the interactive wallet ceremony"""

import sys
from dataclasses import dataclass
from typing import TextIO

from ..core.exceptions import ConsoleIOError


@dataclass
class Streams:
    """
    Bundle of the three standard streams.

    Everything that talks to the operator receives a Streams instance rather
    than touching ``sys.stdin``/``sys.stdout`` directly, so tests can drive
    the dialog with in-memory buffers.
    """

    stdin: TextIO
    stdout: TextIO
    stderr: TextIO

    @classmethod
    def system(cls):
        return cls(stdin=sys.stdin, stdout=sys.stdout, stderr=sys.stderr)

    def is_interactive(self):
        """True when stdin is attached to a terminal"""
        isatty = getattr(self.stdin, "isatty", None)
        return bool(isatty and isatty())


def flushed_write(stream, text):
    """Write and flush immediately so prompts appear before a blocking read"""
    try:
        stream.write(text)
        stream.flush()
    except OSError as e:
        raise ConsoleIOError(f"Could not write to console: {e}") from e


def read_line(streams):
    """
    Read one line from stdin without its line terminator.

    Raises:
        ConsoleIOError: on end of input or a read failure
    """
    try:
        line = streams.stdin.readline()
    except OSError as e:
        raise ConsoleIOError(f"Could not read from console: {e}") from e
    if line == "":
        raise ConsoleIOError("End of input reached while waiting for the operator")
    return line.rstrip("\r\n")


def read_char(streams):
    """Block until one character is available (the "press Enter" acknowledgement)"""
    try:
        return streams.stdin.read(1)
    except OSError as e:
        raise ConsoleIOError(f"Could not read from console: {e}") from e
