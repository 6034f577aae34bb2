"""High-level operations for the wallet generation ceremony"""

from .derivation import Wallet, derive_wallet, wallet_from_address
from .mnemonic import Bip39MnemonicSource, MnemonicSource, derive_seed
from .passphrase import request_mnemonic_passphrase
from .wallet import WalletGenerator, check_collision, create_wallet

__all__ = [
    "Wallet",
    "derive_wallet",
    "wallet_from_address",
    "Bip39MnemonicSource",
    "MnemonicSource",
    "derive_seed",
    "request_mnemonic_passphrase",
    "WalletGenerator",
    "check_collision",
    "create_wallet",
]
