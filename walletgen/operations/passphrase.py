"""Interactive mnemonic passphrase dialog"""

from ..core.exceptions import PassphraseMismatchError, PasswordMismatchError
from ..utils.console import flushed_write, read_char
from ..utils.passwords import MISMATCH_ATTEMPTS, request_new_password

PASSPHRASE_EXPLANATION = (
    "\nPlease provide an extra mnemonic passphrase to ensure your wallet is unique "
    "(NOTE: This passphrase cannot be changed later and still produce the same addresses). "
    "You will encrypt your wallet in a following step...\n"
)
PASSPHRASE_PROMPT = "Mnemonic passphrase (recommended): "
PASSPHRASE_CONFIRMATION_PROMPT = "Confirm mnemonic passphrase: "
PASSPHRASE_MISMATCH = "Passphrases do not match."
EMPTY_PASSPHRASE_WARNING = (
    "\nWhile ill-advised, proceeding with no mnemonic passphrase.\nPress Enter to continue..."
)


def request_mnemonic_passphrase(streams, attempts=MISMATCH_ATTEMPTS):
    """
    Ask the operator for a mnemonic passphrase, entered twice.

    An empty passphrase is allowed, but only after the operator acknowledges
    the warning by pressing Enter.

    Returns:
        The passphrase, or "" when the operator chose none

    Raises:
        PassphraseMismatchError: the entries never matched within ``attempts``
        ConsoleIOError: console input ended or failed
    """
    flushed_write(streams.stdout, PASSPHRASE_EXPLANATION)
    flushed_write(streams.stdout, PASSPHRASE_PROMPT)
    try:
        passphrase = request_new_password(
            PASSPHRASE_CONFIRMATION_PROMPT,
            PASSPHRASE_MISMATCH,
            streams,
            retry_prompt=PASSPHRASE_PROMPT,
            attempts=attempts,
        )
    except PasswordMismatchError as e:
        raise PassphraseMismatchError(PASSPHRASE_MISMATCH) from e

    if passphrase:
        return passphrase

    flushed_write(streams.stdout, EMPTY_PASSPHRASE_WARNING)
    read_char(streams)
    return ""
