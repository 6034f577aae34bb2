"""BIP39 mnemonic generation and seed derivation"""

import logging
from typing import Protocol

from mnemonic import Mnemonic

from ..core.types import Language, WordCount

logger = logging.getLogger(__name__)


class MnemonicSource(Protocol):
    """Anything that can produce a fresh mnemonic phrase"""

    def make(self, word_count: WordCount, language: Language) -> str:
        ...


class Bip39MnemonicSource:
    """Production MnemonicSource backed by the ``mnemonic`` library's CSPRNG"""

    def make(self, word_count: WordCount, language: Language) -> str:
        logger.debug("Generating %d-word %s mnemonic", word_count.value, language.value)
        mnemo = Mnemonic(language.value)
        return mnemo.generate(strength=word_count.strength)


def derive_seed(mnemonic: str, passphrase: str) -> bytes:
    """
    Derive the 64-byte BIP39 seed from a phrase and passphrase.

    Deterministic: the same (mnemonic, passphrase) pair always yields the
    same seed. Both inputs are NFKD-normalised by the library.
    """
    return Mnemonic.to_seed(mnemonic, passphrase=passphrase)
