"""Configuration loading and option resolution"""

import os
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .exceptions import ConfigError
from .types import DEFAULT_CONSUMING_DERIVATION_PATH, DEFAULT_LANGUAGE, DEFAULT_WORD_COUNT
from ..utils.validators import (
    validate_derivation_path,
    validate_earning_wallet,
    validate_language,
    validate_word_count,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = "WALLETGEN_"
CONFIG_FILE_NAME = "config.json"

# Options that may come from the command line, the environment or a config file
OPTION_NAMES = (
    "data_directory",
    "consuming_wallet",
    "earning_wallet",
    "language",
    "word_count",
    "mnemonic_passphrase",
    "wallet_password",
)


@dataclass(frozen=True)
class GenerateWalletOptions:
    """
    Fully resolved options for one wallet generation run.

    ``word_count`` and ``language`` are filled with defaults by
    ``Config.resolve``; the generator treats a missing value as a bug.
    """

    data_directory: Path
    consuming_wallet: str = DEFAULT_CONSUMING_DERIVATION_PATH
    earning_wallet: Optional[str] = None
    language: Optional[str] = DEFAULT_LANGUAGE.display_name
    word_count: Optional[int] = int(DEFAULT_WORD_COUNT)
    mnemonic_passphrase: Optional[str] = field(default=None, repr=False)
    wallet_password: Optional[str] = field(default=None, repr=False)


def default_data_directory():
    return Path.home() / ".walletgen"


class Config:
    """
    Merge option sources for the generate command.

    Precedence, highest first: command line, WALLETGEN_* environment
    variables (a .env file is loaded first), JSON config file, defaults.
    """

    def __init__(self, environ=None, load_env_file=True):
        """
        Args:
            environ: Mapping to read variables from (os.environ if None)
            load_env_file: Load a .env file into os.environ before reading
        """
        if load_env_file and environ is None:
            load_dotenv()
        self.environ = os.environ if environ is None else environ

    def env_values(self):
        """Option values present in the environment"""
        values = {}
        for name in OPTION_NAMES:
            value = self.environ.get(ENV_PREFIX + name.upper())
            if value is not None and value != "":
                values[name] = value
        return values

    def load_config_file(self, path, required):
        """
        Read a JSON object of option values.

        Args:
            path: Config file location
            required: True when the operator named the file explicitly;
                a missing default file is simply skipped

        Raises:
            ConfigError: if the file is required and unreadable, or malformed
        """
        path = Path(path).expanduser()
        if not path.exists() and not required:
            return {}

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Config file {path} could not be read: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} could not be read: expected a JSON object")

        unknown = sorted(set(data) - set(OPTION_NAMES))
        if unknown:
            raise ConfigError(f"Config file {path} has unknown options: {', '.join(unknown)}")

        logger.debug("Loaded %d option(s) from %s", len(data), path)
        return {key: value for key, value in data.items() if value is not None}

    def resolve(self, cli_values, config_file=None):
        """
        Produce GenerateWalletOptions from command-line values.

        Args:
            cli_values: Dict of option name -> value (None means "not given")
            config_file: Path named with --config-file, if any

        Raises:
            ConfigError: on an unreadable config file or an invalid value
        """
        cli = {k: v for k, v in cli_values.items() if k in OPTION_NAMES and v is not None}
        env = self.env_values()

        data_directory = cli.get("data_directory") or env.get("data_directory")
        if data_directory is None and config_file is None:
            data_directory = default_data_directory()

        if config_file is not None:
            file_values = self.load_config_file(config_file, required=True)
        else:
            file_values = self.load_config_file(Path(data_directory) / CONFIG_FILE_NAME, required=False)

        merged = {}
        merged.update(file_values)
        merged.update(env)
        merged.update(cli)
        if data_directory is None:
            data_directory = merged.get("data_directory") or default_data_directory()

        _validate(merged)

        return GenerateWalletOptions(
            data_directory=Path(data_directory).expanduser(),
            consuming_wallet=merged.get("consuming_wallet", DEFAULT_CONSUMING_DERIVATION_PATH),
            earning_wallet=merged.get("earning_wallet"),
            language=merged.get("language", DEFAULT_LANGUAGE.display_name),
            word_count=int(merged.get("word_count", DEFAULT_WORD_COUNT)),
            mnemonic_passphrase=merged.get("mnemonic_passphrase"),
            wallet_password=merged.get("wallet_password"),
        )


def _validate(values):
    string_options = (
        "data_directory",
        "consuming_wallet",
        "earning_wallet",
        "language",
        "mnemonic_passphrase",
        "wallet_password",
    )
    for name in string_options:
        if name in values and not isinstance(values[name], str):
            raise ConfigError(f"Invalid {name.replace('_', '-')}: expected a string, got {values[name]!r}")

    checks = {
        "consuming_wallet": validate_derivation_path,
        "earning_wallet": validate_earning_wallet,
        "language": validate_language,
        "word_count": validate_word_count,
    }
    for name, check in checks.items():
        if name not in values:
            continue
        problem = check(values[name])
        if problem:
            raise ConfigError(f"Invalid {name.replace('_', '-')}: {problem}")
