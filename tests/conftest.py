"""Shared fixtures for the wallet generation tests"""

import io

import pytest

from walletgen.core.config import ENV_PREFIX, GenerateWalletOptions, OPTION_NAMES
from walletgen.core.persistence import PersistentConfiguration
from walletgen.utils.console import Streams

# BIP39 test vector: all-zero entropy
ABANDON_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)


class MnemonicSourceMock:
    """Records make() arguments and hands out queued phrases in order"""

    def __init__(self, *results):
        self.make_parameters = []
        self.make_results = list(results)

    def make(self, word_count, language):
        self.make_parameters.append((word_count, language))
        return self.make_results.pop(0)


def make_streams(stdin_text=""):
    return Streams(stdin=io.StringIO(stdin_text), stdout=io.StringIO(), stderr=io.StringIO())


def make_options(data_directory, **overrides):
    values = {
        "mnemonic_passphrase": "Mortimer",
        "wallet_password": "password123",
    }
    values.update(overrides)
    return GenerateWalletOptions(data_directory=data_directory, **values)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep WALLETGEN_* variables from the developer's shell out of the tests"""
    for name in OPTION_NAMES:
        monkeypatch.delenv(ENV_PREFIX + name.upper(), raising=False)


@pytest.fixture(autouse=True)
def fast_seed_encryption(monkeypatch):
    monkeypatch.setattr(PersistentConfiguration, "kdf_iterations", 1000)


@pytest.fixture
def data_directory(tmp_path):
    path = tmp_path / "walletgen-home"
    path.mkdir()
    return path


@pytest.fixture
def persistent_config(data_directory):
    store = PersistentConfiguration.open(data_directory)
    yield store
    store.close()
