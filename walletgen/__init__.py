"""
walletgen - Interactive HD wallet generation with BIP39 mnemonics
"""

from .core.config import Config, GenerateWalletOptions
from .core.exceptions import ConfigError, FatalError, StorageError, WalletGenError
from .core.persistence import PersistentConfiguration
from .core.types import WalletCreationConfig
from .operations.wallet import WalletGenerator, create_wallet

__version__ = "0.1.0"
__all__ = [
    "Config",
    "GenerateWalletOptions",
    "ConfigError",
    "FatalError",
    "StorageError",
    "WalletGenError",
    "PersistentConfiguration",
    "WalletCreationConfig",
    "WalletGenerator",
    "create_wallet",
]
