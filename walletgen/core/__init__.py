"""Core module - configuration, exceptions, types, persistence and logging"""

from .config import Config, GenerateWalletOptions
from .exceptions import (
    WalletGenError,
    ConfigError,
    StorageError,
    FatalError,
    SeedCollisionError,
    PassphraseMismatchError,
)
from .persistence import PersistentConfiguration
from .types import (
    WordCount,
    Language,
    EarningAddress,
    EarningDerivationPath,
    DerivationPathWalletInfo,
    WalletCreationConfig,
)

__all__ = [
    "Config",
    "GenerateWalletOptions",
    "WalletGenError",
    "ConfigError",
    "StorageError",
    "FatalError",
    "SeedCollisionError",
    "PassphraseMismatchError",
    "PersistentConfiguration",
    "WordCount",
    "Language",
    "EarningAddress",
    "EarningDerivationPath",
    "DerivationPathWalletInfo",
    "WalletCreationConfig",
]
