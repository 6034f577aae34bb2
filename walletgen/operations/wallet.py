"""Wallet generation operations"""

import logging

from ..core.exceptions import InvariantError, SeedCollisionError
from ..core.types import (
    EarningAddress,
    Language,
    WalletCreationConfig,
    WordCount,
    earning_wallet_spec,
)
from ..utils.console import Streams, flushed_write
from ..utils.passwords import MISMATCH_ATTEMPTS, request_new_password
from .derivation import derive_wallet, wallet_from_address
from .mnemonic import Bip39MnemonicSource, derive_seed
from .passphrase import request_mnemonic_passphrase

logger = logging.getLogger(__name__)

RECOVERY_PHRASE_HEADER = (
    "\n\nRecord the following mnemonic recovery phrase in the sequence provided "
    "and keep it secret! You cannot recover your wallet without these words "
    "plus your mnemonic passphrase if you provided one.\n\n"
)
WALLET_PASSWORD_PROMPT = "\n\nWallet encryption password: "
WALLET_PASSWORD_RETRY_PROMPT = "Wallet encryption password: "
WALLET_PASSWORD_CONFIRMATION_PROMPT = "Confirm wallet password: "
WALLET_PASSWORD_MISMATCH = "Passwords do not match."


def check_collision(persistent_config):
    """
    Refuse to continue when a mnemonic seed is already stored.

    Raises:
        SeedCollisionError: a wallet has already been generated here
    """
    if persistent_config.has_stored_seed():
        raise SeedCollisionError("Can't generate wallets: mnemonic seed has already been created")


def _nonblank_password(password):
    if not password:
        return "Password must not be blank."
    return None


class WalletGenerator:
    """
    One-shot wallet generation ceremony.

    Runs strictly forward: collision check, passphrase, mnemonic, seed,
    wallets, report. The recovery phrase is written to stdout exactly once.
    Persisting the result is left to the caller (see create_wallet).
    """

    def __init__(self, mnemonic_source=None, streams=None, mismatch_attempts=MISMATCH_ATTEMPTS):
        """
        Args:
            mnemonic_source: MnemonicSource (Bip39MnemonicSource if None)
            streams: Console streams (process stdio if None)
            mismatch_attempts: Confirmation rounds allowed in password dialogs
        """
        self.mnemonic_source = mnemonic_source or Bip39MnemonicSource()
        self.streams = streams or Streams.system()
        self.mismatch_attempts = mismatch_attempts

    def generate(self, options, persistent_config):
        """
        Run the ceremony.

        Args:
            options: GenerateWalletOptions
            persistent_config: Store consulted (read-only) for an existing seed

        Returns:
            WalletCreationConfig ready to be persisted

        Raises:
            FatalError: collision, passphrase mismatch, derivation failure,
                missing defaults or console failure
            ConfigError: unknown language name
        """
        check_collision(persistent_config)

        if not options.consuming_wallet:
            raise InvariantError("--consuming-wallet is not defaulted")
        consuming_path = options.consuming_wallet
        earning_wallet = earning_wallet_spec(options.earning_wallet)

        passphrase = self.make_mnemonic_passphrase(options)
        mnemonic = self.make_mnemonic(options)
        seed = derive_seed(mnemonic, passphrase)

        consuming_wallet, earning_wallet_value = self.derive_wallets(seed, consuming_path, earning_wallet)
        self.report_wallet_information(mnemonic, consuming_wallet, earning_wallet_value)

        wallet_password = self.make_wallet_password(options)
        return WalletCreationConfig.build(
            mnemonic_seed=seed,
            wallet_password=wallet_password,
            consuming_derivation_path=consuming_path,
            earning_wallet=earning_wallet,
        )

    def make_mnemonic_passphrase(self, options):
        """Configured passphrase if given, otherwise ask the operator"""
        if options.mnemonic_passphrase is not None:
            return options.mnemonic_passphrase
        return request_mnemonic_passphrase(self.streams, attempts=self.mismatch_attempts)

    def make_mnemonic(self, options):
        """
        Ask the mnemonic source for a phrase of the configured size and language.

        Raises:
            InvariantError: word count or language was not defaulted upstream
            ConfigError: the language name is not supported
        """
        if options.word_count is None:
            raise InvariantError("--word-count is not defaulted")
        if options.language is None:
            raise InvariantError("--language is not defaulted")
        try:
            word_count = WordCount(int(options.word_count))
        except (TypeError, ValueError) as e:
            raise InvariantError("--word-count is not properly value-restricted") from e
        language = Language.from_name(options.language)

        logger.info("Generating %d-word %s mnemonic", word_count.value, language.display_name)
        return self.mnemonic_source.make(word_count, language)

    def derive_wallets(self, seed, consuming_path, earning_wallet):
        """
        Derive the consuming wallet, and the earning wallet unless it is a
        literal address.

        Returns:
            Tuple of (consuming Wallet, earning Wallet)
        """
        consuming_wallet = derive_wallet(seed, consuming_path, kind="consuming")
        logger.info("Consuming wallet %s at %s", consuming_wallet, consuming_path)

        if isinstance(earning_wallet, EarningAddress):
            earning = wallet_from_address(earning_wallet.address)
        else:
            earning = derive_wallet(seed, earning_wallet.path, kind="earning")
        logger.info("Earning wallet %s", earning)
        return consuming_wallet, earning

    def report_wallet_information(self, mnemonic, consuming_wallet, earning_wallet):
        """Write the recovery phrase and both wallets to stdout, in order"""
        out = self.streams.stdout
        flushed_write(out, RECOVERY_PHRASE_HEADER)
        flushed_write(out, mnemonic)
        flushed_write(out, "\n\n")
        flushed_write(
            out, f"Consuming Wallet ({consuming_wallet.derivation_path}): {consuming_wallet}\n"
        )
        if earning_wallet.derivation_path is None:
            flushed_write(out, f"  Earning Wallet: {earning_wallet}")
        else:
            flushed_write(
                out, f"  Earning Wallet ({earning_wallet.derivation_path}): {earning_wallet}"
            )

    def make_wallet_password(self, options):
        """Configured wallet password if given, otherwise ask (blank not allowed)"""
        if options.wallet_password is not None:
            return options.wallet_password
        flushed_write(self.streams.stdout, WALLET_PASSWORD_PROMPT)
        return request_new_password(
            WALLET_PASSWORD_CONFIRMATION_PROMPT,
            WALLET_PASSWORD_MISMATCH,
            self.streams,
            verifier=_nonblank_password,
            retry_prompt=WALLET_PASSWORD_RETRY_PROMPT,
            attempts=self.mismatch_attempts,
        )


def create_wallet(config, persistent_config):
    """
    Persist a WalletCreationConfig in a single transaction.

    The seed is stored encrypted under the wallet password. For a derived
    earning wallet the derived address is stored next to its path.

    Raises:
        SeedCollisionError: another run stored a seed in the meantime
    """
    info = config.derivation_path_info
    earning_address = config.earning_wallet_address
    if info is not None and info.earning_derivation_path is not None:
        earning_address = derive_wallet(
            info.mnemonic_seed, info.earning_derivation_path, kind="earning"
        ).address
    elif earning_address is not None:
        earning_address = wallet_from_address(earning_address).address

    with persistent_config.transaction():
        if info is not None:
            persistent_config.set_mnemonic_seed(info.mnemonic_seed, info.wallet_password)
            persistent_config.set_consuming_wallet_derivation_path(info.consuming_derivation_path)
            if info.earning_derivation_path is not None:
                persistent_config.set_earning_wallet_derivation_path(info.earning_derivation_path)
        if earning_address is not None:
            persistent_config.set_earning_wallet_address(earning_address)

    logger.info("Wallet configuration stored in %s", persistent_config.path or "memory")
