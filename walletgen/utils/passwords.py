"""Two-entry password dialog with bounded confirmation retries"""

import getpass
import logging

from ..core.exceptions import (
    ConsoleIOError,
    PasswordMismatchError,
    PasswordVerificationError,
)
from .console import flushed_write, read_line

logger = logging.getLogger(__name__)

# Entry/confirmation rounds before the dialog gives up
MISMATCH_ATTEMPTS = 3


def read_password(streams):
    """
    Read a password without echo when attached to a terminal.

    The caller has already written the prompt, so getpass is given an empty
    one. Non-terminal input (pipes, tests) is read as a plain line.
    """
    if not streams.is_interactive():
        return read_line(streams)
    try:
        return getpass.getpass(prompt="", stream=streams.stdout)
    except EOFError as e:
        raise ConsoleIOError("End of input reached while reading a password") from e


def request_new_password(
    confirmation_prompt,
    mismatch_message,
    streams,
    verifier=None,
    retry_prompt=None,
    attempts=MISMATCH_ATTEMPTS,
):
    """
    Ask for a new password twice and return it once both entries agree.

    Args:
        confirmation_prompt: Written before the second entry
        mismatch_message: Written (with a newline) when the entries differ
        streams: Streams to talk through
        verifier: Optional callable returning an error message for an
            unacceptable entry, or None to accept it
        retry_prompt: Written before each entry after the first
        attempts: Number of rounds before giving up

    Returns:
        The confirmed password (possibly empty, if the verifier allows it)

    Raises:
        PasswordMismatchError: entries never matched within ``attempts``
        PasswordVerificationError: the final round's entry was rejected
        ConsoleIOError: console input ended or failed
    """
    if attempts < 1:
        raise ValueError(f"attempts must be at least 1, got {attempts}")

    last_failure = None
    for attempt in range(attempts):
        if attempt > 0 and retry_prompt:
            flushed_write(streams.stdout, retry_prompt)

        password = read_password(streams)

        problem = verifier(password) if verifier else None
        if problem:
            flushed_write(streams.stdout, f"{problem}\n")
            last_failure = PasswordVerificationError(problem)
            continue

        flushed_write(streams.stdout, confirmation_prompt)
        confirmation = read_password(streams)
        if confirmation == password:
            return password

        logger.debug("Password confirmation mismatch (attempt %d of %d)", attempt + 1, attempts)
        flushed_write(streams.stdout, f"{mismatch_message}\n")
        last_failure = PasswordMismatchError(mismatch_message)

    raise last_failure
