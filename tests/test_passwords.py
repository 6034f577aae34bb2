"""Tests for the two-entry password dialog"""

import pytest

from walletgen.core.exceptions import (
    ConsoleIOError,
    PasswordMismatchError,
    PasswordVerificationError,
)
from walletgen.utils.passwords import MISMATCH_ATTEMPTS, request_new_password

from conftest import make_streams


def _nonblank(password):
    return "Must not be blank." if not password else None


def test_matching_entries_return_password():
    streams = make_streams("hunter2\nhunter2\n")

    result = request_new_password("Confirm: ", "No match.", streams)

    assert result == "hunter2"
    assert streams.stdout.getvalue() == "Confirm: "


def test_mismatch_then_match_writes_message_and_retry_prompt():
    streams = make_streams("one\neno\ntwo\ntwo\n")

    result = request_new_password("Confirm: ", "No match.", streams, retry_prompt="Password: ")

    assert result == "two"
    assert streams.stdout.getvalue() == "Confirm: No match.\nPassword: Confirm: "


def test_three_mismatches_exhaust_the_dialog():
    streams = make_streams("one\neno\ntwo\nowt\nthree\neerht\n")

    with pytest.raises(PasswordMismatchError, match="No match."):
        request_new_password("Confirm: ", "No match.", streams)

    assert MISMATCH_ATTEMPTS == 3
    assert streams.stdout.getvalue().count("No match.\n") == 3


def test_attempt_bound_is_configurable():
    streams = make_streams("one\neno\ntwo\ntwo\n")

    with pytest.raises(PasswordMismatchError):
        request_new_password("Confirm: ", "No match.", streams, attempts=1)

    assert streams.stdin.read() == "two\ntwo\n"


def test_verifier_rejection_retries_without_confirmation():
    streams = make_streams("\nsecret\nsecret\n")

    result = request_new_password("Confirm: ", "No match.", streams, verifier=_nonblank)

    assert result == "secret"
    assert streams.stdout.getvalue() == "Must not be blank.\nConfirm: "


def test_verifier_rejection_on_final_attempt():
    streams = make_streams("\n\n")

    with pytest.raises(PasswordVerificationError, match="Must not be blank."):
        request_new_password("Confirm: ", "No match.", streams, verifier=_nonblank, attempts=2)


def test_end_of_input_is_a_console_failure():
    streams = make_streams("only-once\n")

    with pytest.raises(ConsoleIOError):
        request_new_password("Confirm: ", "No match.", streams)


def test_zero_attempts_is_rejected():
    with pytest.raises(ValueError):
        request_new_password("Confirm: ", "No match.", make_streams(), attempts=0)
