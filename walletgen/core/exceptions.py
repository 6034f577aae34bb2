"""Custom exceptions for wallet generation"""


class WalletGenError(Exception):
    """Base exception for all wallet generation errors"""
    pass


class ConfigError(WalletGenError):
    """Configuration-related errors (bad option values, unreadable config file)"""
    pass


class StorageError(WalletGenError):
    """Persistent configuration store errors"""
    pass


class PasswordError(WalletGenError):
    """Password entry dialog failures"""
    pass


class PasswordMismatchError(PasswordError):
    """Entry and confirmation never matched within the allowed attempts"""
    pass


class PasswordVerificationError(PasswordError):
    """Entry was rejected by the verifier on the final attempt"""
    pass


class FatalError(WalletGenError):
    """
    Unrecoverable condition: the generation run must stop.

    Raised instead of exiting so the hosting application decides how to
    report it and which status code to use.
    """
    pass


class InvariantError(FatalError):
    """A value that upstream parsing guarantees is missing or out of range"""
    pass


class SeedCollisionError(FatalError):
    """A mnemonic seed has already been stored"""
    pass


class PassphraseMismatchError(FatalError):
    """Mnemonic passphrase confirmation retries exhausted"""
    pass


class DerivationError(FatalError):
    """Key pair could not be derived from the seed and derivation path"""
    pass


class AddressError(FatalError):
    """A previously validated wallet address no longer parses"""
    pass


class ConsoleIOError(FatalError):
    """Console input/output failed or ended unexpectedly"""
    pass
