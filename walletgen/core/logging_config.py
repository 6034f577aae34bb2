"""
Logging configuration
Wallet events are logged but never include secret material
"""

import logging
import re
import sys

# "mnemonic=...", "seed: ...", "passphrase = ..." and friends
_SECRET_ASSIGNMENT = re.compile(
    r"\b(mnemonic|phrase|seed|passphrase|password|private[_ ]?key)\s*[=:]",
    re.IGNORECASE,
)


class SecretFilter(logging.Filter):
    """Blank out records that look like they carry a secret value"""

    REDACTED = "[REDACTED - secret material filtered]"

    def filter(self, record: logging.LogRecord) -> bool:
        if _SECRET_ASSIGNMENT.search(record.getMessage()):
            record.msg = self.REDACTED
            record.args = None
        return True


def setup_logging(verbose=False, stream=None):
    """
    Configure application logging.

    Output goes to stderr so it never interleaves with the recovery phrase
    report on stdout.
    """
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SecretFilter())

    root = logging.getLogger("walletgen")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)
    return root
