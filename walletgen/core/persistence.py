"""Persistent wallet configuration: a key/value table in the data directory"""

import os
import json
import hashlib
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path

from Crypto.Cipher import AES

from .exceptions import SeedCollisionError, StorageError

logger = logging.getLogger(__name__)

DB_FILE_NAME = "walletgen.db"

SEED_KDF_ITERATIONS = 600_000
SEED_ENVELOPE_VERSION = 1


def encrypt_seed(seed, wallet_password, iterations=SEED_KDF_ITERATIONS):
    """
    Encrypt a mnemonic seed under the wallet password.

    PBKDF2-HMAC-SHA256 key, AES-256-GCM with a fresh nonce.

    Returns:
        JSON envelope (str) holding ciphertext, nonce, tag, salt and KDF params
    """
    salt = os.urandom(16)
    key = hashlib.pbkdf2_hmac("sha256", wallet_password.encode("utf-8"), salt, iterations)
    nonce = os.urandom(12)
    cipher = AES.new(key, AES.MODE_GCM, nonce=nonce)
    ciphertext, tag = cipher.encrypt_and_digest(bytes(seed))
    return json.dumps({
        "version": SEED_ENVELOPE_VERSION,
        "kdf": "pbkdf2-hmac-sha256",
        "kdf_iterations": iterations,
        "salt": salt.hex(),
        "nonce": nonce.hex(),
        "tag": tag.hex(),
        "ciphertext": ciphertext.hex(),
    })


def decrypt_seed(envelope, wallet_password):
    """
    Recover the seed from an envelope produced by encrypt_seed.

    Raises:
        StorageError: wrong password, tampered data or malformed envelope
    """
    try:
        data = json.loads(envelope)
        salt = bytes.fromhex(data["salt"])
        nonce = bytes.fromhex(data["nonce"])
        tag = bytes.fromhex(data["tag"])
        ciphertext = bytes.fromhex(data["ciphertext"])
        iterations = int(data["kdf_iterations"])
    except (ValueError, KeyError, TypeError) as e:
        raise StorageError(f"Stored mnemonic seed is malformed: {e}") from e

    key = hashlib.pbkdf2_hmac("sha256", wallet_password.encode("utf-8"), salt, iterations)
    cipher = AES.new(key, AES.MODE_GCM, nonce=nonce)
    try:
        return cipher.decrypt_and_verify(ciphertext, tag)
    except ValueError as e:
        raise StorageError("Wallet password does not unlock the stored mnemonic seed") from e


class PersistentConfiguration:
    """
    Wallet facts that outlive a single run.

    Only the seed is secret, and it is stored encrypted. Derivation paths and
    the earning address are public and stored as plain text.
    """

    SEED = "seed"
    CONSUMING_DERIVATION_PATH = "consuming_wallet_derivation_path"
    EARNING_DERIVATION_PATH = "earning_wallet_derivation_path"
    EARNING_ADDRESS = "earning_wallet_address"

    kdf_iterations = SEED_KDF_ITERATIONS

    def __init__(self, connection, path=None):
        """
        Args:
            connection: sqlite3 connection opened in autocommit mode
            path: Database file location (informational)
        """
        self.connection = connection
        self.path = path
        self._ensure_schema()

    @classmethod
    def open(cls, data_directory):
        """Open (creating if needed) the store inside ``data_directory``"""
        data_directory = Path(data_directory).expanduser()
        try:
            data_directory.mkdir(parents=True, exist_ok=True)
            path = data_directory / DB_FILE_NAME
            connection = sqlite3.connect(str(path), isolation_level=None)
        except (OSError, sqlite3.Error) as e:
            raise StorageError(f"Could not open wallet database in {data_directory}: {e}") from e
        logger.debug("Opened wallet database %s", path)
        return cls(connection, path=path)

    @classmethod
    def in_memory(cls):
        return cls(sqlite3.connect(":memory:", isolation_level=None))

    def close(self):
        self.connection.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def _ensure_schema(self):
        self._execute(
            "CREATE TABLE IF NOT EXISTS config (name TEXT PRIMARY KEY, value TEXT NOT NULL)"
        )

    def _execute(self, sql, params=()):
        try:
            return self.connection.execute(sql, params)
        except sqlite3.IntegrityError:
            raise
        except sqlite3.Error as e:
            raise StorageError(f"Wallet database error: {e}") from e

    @contextmanager
    def transaction(self):
        """Group several writes; all of them land or none do"""
        self._execute("BEGIN IMMEDIATE")
        try:
            yield self
        except BaseException:
            self._execute("ROLLBACK")
            raise
        self._execute("COMMIT")

    def get(self, name):
        row = self._execute("SELECT value FROM config WHERE name = ?", (name,)).fetchone()
        return row[0] if row else None

    def set(self, name, value):
        self._execute(
            "INSERT OR REPLACE INTO config (name, value) VALUES (?, ?)",
            (name, value),
        )

    def encrypted_mnemonic_seed(self):
        """Stored seed envelope, or None when no wallet has been generated"""
        return self.get(self.SEED)

    def has_stored_seed(self):
        return self.encrypted_mnemonic_seed() is not None

    def set_mnemonic_seed(self, seed, wallet_password):
        """
        Encrypt and store the seed. Never replaces an existing one.

        Raises:
            SeedCollisionError: a seed is already stored
        """
        envelope = encrypt_seed(seed, wallet_password, iterations=self.kdf_iterations)
        try:
            self._execute("INSERT INTO config (name, value) VALUES (?, ?)", (self.SEED, envelope))
        except sqlite3.IntegrityError as e:
            raise SeedCollisionError(
                "Can't store wallet: mnemonic seed has already been created"
            ) from e

    def mnemonic_seed(self, wallet_password):
        envelope = self.encrypted_mnemonic_seed()
        if envelope is None:
            return None
        return decrypt_seed(envelope, wallet_password)

    @property
    def consuming_wallet_derivation_path(self):
        return self.get(self.CONSUMING_DERIVATION_PATH)

    def set_consuming_wallet_derivation_path(self, path):
        self.set(self.CONSUMING_DERIVATION_PATH, path)

    @property
    def earning_wallet_derivation_path(self):
        return self.get(self.EARNING_DERIVATION_PATH)

    def set_earning_wallet_derivation_path(self, path):
        self.set(self.EARNING_DERIVATION_PATH, path)

    @property
    def earning_wallet_address(self):
        return self.get(self.EARNING_ADDRESS)

    def set_earning_wallet_address(self, address):
        self.set(self.EARNING_ADDRESS, address)
