"""Wallet generation type definitions and helpers"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Union

from .exceptions import ConfigError

DEFAULT_CONSUMING_DERIVATION_PATH = "m/44'/60'/0'/0/0"
DEFAULT_EARNING_DERIVATION_PATH = "m/44'/60'/0'/0/1"


class WordCount(IntEnum):
    """Number of words in a BIP39 mnemonic phrase"""

    WORDS_12 = 12
    WORDS_15 = 15
    WORDS_18 = 18
    WORDS_21 = 21
    WORDS_24 = 24

    @property
    def strength(self) -> int:
        """Entropy bits that produce this many words (11 bits per word, minus checksum)"""
        return self.value * 32 // 3

    @classmethod
    def values(cls):
        return [member.value for member in cls]


DEFAULT_WORD_COUNT = WordCount.WORDS_12


class Language(Enum):
    """
    BIP39 wordlist languages.

    The value is the wordlist identifier understood by the ``mnemonic``
    library; ``display_name`` is the name operators type on the command line.
    """

    ENGLISH = "english"
    CHINESE_SIMPLIFIED = "chinese_simplified"
    CHINESE_TRADITIONAL = "chinese_traditional"
    FRENCH = "french"
    ITALIAN = "italian"
    JAPANESE = "japanese"
    KOREAN = "korean"
    SPANISH = "spanish"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> "Language":
        """
        Resolve a language from its display name, English name or wordlist id.

        Raises:
            ConfigError: if the name matches no supported language
        """
        key = name.strip().lower()
        for language in cls:
            candidates = (
                language.value,
                language.value.replace("_", " "),
                language.display_name.lower(),
            )
            if key in candidates:
                return language
        raise ConfigError(
            f"Unsupported mnemonic language '{name}'. "
            f"Choose one of: {', '.join(cls.display_names())}"
        )

    @classmethod
    def display_names(cls):
        return [language.display_name for language in cls]


_DISPLAY_NAMES = {
    Language.ENGLISH: "English",
    Language.CHINESE_SIMPLIFIED: "中文(简体)",
    Language.CHINESE_TRADITIONAL: "中文(繁體)",
    Language.FRENCH: "Français",
    Language.ITALIAN: "Italiano",
    Language.JAPANESE: "日本語",
    Language.KOREAN: "한국어",
    Language.SPANISH: "Español",
}

DEFAULT_LANGUAGE = Language.ENGLISH


@dataclass(frozen=True)
class EarningAddress:
    """Earning wallet given as a literal address; nothing is derived"""

    address: str


@dataclass(frozen=True)
class EarningDerivationPath:
    """Earning wallet derived from the seed at this path"""

    path: str


EarningWalletSpec = Union[EarningAddress, EarningDerivationPath]


def earning_wallet_spec(value: Optional[str]) -> EarningWalletSpec:
    """Classify an --earning-wallet value: ``0x`` prefix means a literal address"""
    if value is None:
        return EarningDerivationPath(DEFAULT_EARNING_DERIVATION_PATH)
    if value.startswith("0x"):
        return EarningAddress(value)
    return EarningDerivationPath(value)


@dataclass(frozen=True)
class DerivationPathWalletInfo:
    """
    Secret material and paths needed to persist an HD wallet.

    The seed and wallet password are excluded from ``repr`` so the record
    can appear in tracebacks and debug output without leaking them.
    """

    mnemonic_seed: bytes = field(repr=False)
    wallet_password: str = field(repr=False)
    consuming_derivation_path: str
    earning_derivation_path: Optional[str] = None


@dataclass(frozen=True)
class WalletCreationConfig:
    """
    Result of a generation run, handed to the caller for persistence.

    Exactly one earning branch is populated: ``earning_wallet_address`` for a
    literal address, ``derivation_path_info.earning_derivation_path`` for a
    derived earning wallet.
    """

    earning_wallet_address: Optional[str] = None
    derivation_path_info: Optional[DerivationPathWalletInfo] = None

    @property
    def earning_wallet(self) -> Optional[EarningWalletSpec]:
        if self.earning_wallet_address is not None:
            return EarningAddress(self.earning_wallet_address)
        info = self.derivation_path_info
        if info is not None and info.earning_derivation_path is not None:
            return EarningDerivationPath(info.earning_derivation_path)
        return None

    @classmethod
    def build(
        cls,
        mnemonic_seed: bytes,
        wallet_password: str,
        consuming_derivation_path: str,
        earning_wallet: EarningWalletSpec,
    ) -> "WalletCreationConfig":
        if isinstance(earning_wallet, EarningAddress):
            earning_address, earning_path = earning_wallet.address, None
        else:
            earning_address, earning_path = None, earning_wallet.path
        return cls(
            earning_wallet_address=earning_address,
            derivation_path_info=DerivationPathWalletInfo(
                mnemonic_seed=mnemonic_seed,
                wallet_password=wallet_password,
                consuming_derivation_path=consuming_derivation_path,
                earning_derivation_path=earning_path,
            ),
        )
