"""Tests for the mnemonic passphrase dialog"""

import pytest

from walletgen.core.exceptions import FatalError, PassphraseMismatchError
from walletgen.operations.passphrase import request_mnemonic_passphrase

from conftest import make_streams

EXPLANATION = (
    "\nPlease provide an extra mnemonic passphrase to ensure your wallet is unique "
    "(NOTE: This passphrase cannot be changed later and still produce the same addresses). "
    "You will encrypt your wallet in a following step...\n"
)


def test_matching_passphrase_is_returned():
    streams = make_streams("Mortimer\nMortimer\n")

    passphrase = request_mnemonic_passphrase(streams)

    assert passphrase == "Mortimer"
    assert streams.stdout.getvalue() == (
        EXPLANATION + "Mnemonic passphrase (recommended): Confirm mnemonic passphrase: "
    )


def test_blank_passphrase_is_allowed_with_scolding():
    streams = make_streams("\n\n\nleft over")

    passphrase = request_mnemonic_passphrase(streams)

    assert passphrase == ""
    assert streams.stdout.getvalue() == (
        EXPLANATION
        + "Mnemonic passphrase (recommended): Confirm mnemonic passphrase: "
        + "\nWhile ill-advised, proceeding with no mnemonic passphrase.\nPress Enter to continue..."
    )
    # exactly one character consumed by the acknowledgement
    assert streams.stdin.read() == "left over"


def test_three_mismatches_are_fatal():
    streams = make_streams("one\neno\ntwo\nowt\nthree\neerht\n")

    with pytest.raises(PassphraseMismatchError) as excinfo:
        request_mnemonic_passphrase(streams)

    assert str(excinfo.value) == "Passphrases do not match."
    assert isinstance(excinfo.value, FatalError)


def test_mismatch_retry_prompts_for_passphrase_again():
    streams = make_streams("one\neno\nMortimer\nMortimer\n")

    passphrase = request_mnemonic_passphrase(streams)

    assert passphrase == "Mortimer"
    assert streams.stdout.getvalue().endswith(
        "Confirm mnemonic passphrase: Passphrases do not match.\n"
        "Mnemonic passphrase (recommended): Confirm mnemonic passphrase: "
    )


def test_retry_bound_can_be_lowered():
    streams = make_streams("one\neno\nMortimer\nMortimer\n")

    with pytest.raises(PassphraseMismatchError):
        request_mnemonic_passphrase(streams, attempts=1)
