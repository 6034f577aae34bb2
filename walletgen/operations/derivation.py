"""Consuming and earning wallet derivation from a BIP39 seed"""

from dataclasses import dataclass
from typing import Optional

from eth_account import Account
from eth_account.hdaccount import key_from_seed
from eth_utils import ValidationError
from web3 import Web3

from ..core.exceptions import AddressError, DerivationError


@dataclass(frozen=True)
class Wallet:
    """
    Public face of a wallet: its address and, if derived, where from.

    Deliberately holds no key material.
    """

    address: str
    derivation_path: Optional[str] = None

    def __str__(self):
        return self.address


def derive_wallet(seed, derivation_path, kind="consuming"):
    """
    Derive the wallet at ``derivation_path`` from ``seed``.

    Args:
        seed: BIP39 seed bytes
        derivation_path: BIP32 path, e.g. m/44'/60'/0'/0/0
        kind: "consuming" or "earning", used in the error message

    Raises:
        DerivationError: the path is malformed or derivation failed. Paths
            are validated when options are parsed, so this is a hard stop.
    """
    try:
        private_key = key_from_seed(seed, derivation_path)
        account = Account.from_key(private_key)
    except (ValueError, TypeError, OverflowError, ValidationError) as e:
        raise DerivationError(
            f"Couldn't make key pair from {kind} derivation path '{derivation_path}': {e}"
        ) from e
    return Wallet(address=account.address, derivation_path=derivation_path)


def wallet_from_address(address):
    """
    Wrap a literal earning address; no seed material is consulted.

    Raises:
        AddressError: the address no longer parses. It was validated when
            options were parsed, so this signals a validation gap.
    """
    if not isinstance(address, str) or not address.startswith("0x") or not Web3.is_address(address):
        raise AddressError(f"Address doesn't work anymore: {address!r}")
    return Wallet(address=Web3.to_checksum_address(address))
