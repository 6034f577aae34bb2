"""Validation for values that arrive from the command line, env or config file"""

from eth_account.hdaccount.deterministic import HDPath
from eth_utils import ValidationError
from web3 import Web3

from ..core.exceptions import ConfigError
from ..core.types import Language, WordCount

# BIP32 child indices are 31 bits; the top bit marks a hardened index
MAX_CHILD_INDEX = 2**31 - 1


def _child_indices(path):
    for node in path.split("/")[1:]:
        yield int(node[:-1] if node.endswith("'") else node)


def is_valid_derivation_path(path):
    """True when ``path`` parses as a BIP32 path such as m/44'/60'/0'/0/0"""
    try:
        HDPath(path)
        indices = list(_child_indices(path))
    except (ValueError, TypeError, AttributeError, ValidationError):
        return False
    return all(0 <= index <= MAX_CHILD_INDEX for index in indices)


def is_valid_address(address):
    """True for a 0x-prefixed, 20-byte address (checksum verified if mixed case)"""
    return isinstance(address, str) and address.startswith("0x") and Web3.is_address(address)


def validate_derivation_path(path):
    """Return ``path`` or an error message"""
    if is_valid_derivation_path(path):
        return None
    return f"'{path}' is not a valid derivation path"


def validate_earning_wallet(value):
    """An earning wallet is either a literal 0x address or a derivation path"""
    if value.startswith("0x"):
        if is_valid_address(value):
            return None
        return f"'{value}' is not a valid Ethereum address"
    return validate_derivation_path(value)


def validate_word_count(value):
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        return f"'{value}' is not a whole number"
    try:
        count = int(value)
    except (TypeError, ValueError):
        return f"'{value}' is not a number"
    if count not in WordCount.values():
        allowed = ", ".join(str(v) for v in WordCount.values())
        return f"Word count must be one of {allowed}, got {count}"
    return None


def validate_language(value):
    try:
        Language.from_name(value)
    except ConfigError as e:
        return str(e)
    return None
