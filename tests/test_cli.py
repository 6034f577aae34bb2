"""Tests for the walletgen command line"""

import json

import pytest

from walletgen.cli.main import build_parser, cmd_wallet_generate, main
from walletgen.core.persistence import PersistentConfiguration
from walletgen.core.types import Language, WordCount
from walletgen.operations.mnemonic import derive_seed

from conftest import ABANDON_MNEMONIC, MnemonicSourceMock, make_streams


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def generate_args(data_directory, *extra):
    return [
        "wallet", "generate",
        "--data-directory", str(data_directory),
        "--mnemonic-passphrase", "Mortimer",
        "--wallet-password", "password123",
        *extra,
    ]


def test_generate_reports_and_stores_wallet(data_directory, capsys):
    main(generate_args(data_directory))

    out, err = capsys.readouterr()
    assert "Record the following mnemonic recovery phrase" in out
    assert "Consuming Wallet (m/44'/60'/0'/0/0): 0x" in out
    assert "  Earning Wallet (m/44'/60'/0'/0/1): 0x" in out
    assert "Wallet configuration saved to" in err

    with PersistentConfiguration.open(data_directory) as store:
        assert store.has_stored_seed()
        assert len(store.mnemonic_seed("password123")) == 64
        assert store.consuming_wallet_derivation_path == "m/44'/60'/0'/0/0"
        assert store.earning_wallet_derivation_path == "m/44'/60'/0'/0/1"
        assert store.earning_wallet_address in out


def test_second_generation_is_refused(data_directory, capsys):
    main(generate_args(data_directory))
    with PersistentConfiguration.open(data_directory) as store:
        stored = store.encrypted_mnemonic_seed()
    capsys.readouterr()

    with pytest.raises(SystemExit) as excinfo:
        main(generate_args(data_directory))

    out, err = capsys.readouterr()
    assert excinfo.value.code == 1
    assert "Error: Can't generate wallets: mnemonic seed has already been created" in err
    assert "Record the following" not in out
    with PersistentConfiguration.open(data_directory) as store:
        assert store.encrypted_mnemonic_seed() == stored


def test_show_lists_stored_wallet(data_directory, capsys):
    main(generate_args(data_directory, "--earning-wallet", "0x0123456789012345678901234567890123456789"))
    capsys.readouterr()

    main(["wallet", "show", "--data-directory", str(data_directory)])

    out, _ = capsys.readouterr()
    assert "stored (encrypted)" in out
    assert "0x0123456789012345678901234567890123456789" in out


def test_explicit_options_reach_the_generator(data_directory):
    args = build_parser()[0].parse_args(generate_args(
        data_directory,
        "--word-count", "15",
        "--language", "español",
        "--consuming-wallet", "m/44'/60'/0'/77/78",
        "--earning-wallet", "m/44'/60'/0'/78/77",
    ))
    source = MnemonicSourceMock(ABANDON_MNEMONIC)

    config = cmd_wallet_generate(args, streams=make_streams(), mnemonic_source=source)

    assert source.make_parameters == [(WordCount.WORDS_15, Language.SPANISH)]
    info = config.derivation_path_info
    assert info.mnemonic_seed == derive_seed(ABANDON_MNEMONIC, "Mortimer")
    assert info.consuming_derivation_path == "m/44'/60'/0'/77/78"
    assert info.earning_derivation_path == "m/44'/60'/0'/78/77"


def test_interactive_generation(data_directory):
    args = build_parser()[0].parse_args(["wallet", "generate", "--data-directory", str(data_directory)])
    streams = make_streams("\n\n\nwallet-pw\nwallet-pw\n")

    config = cmd_wallet_generate(args, streams=streams, mnemonic_source=MnemonicSourceMock(ABANDON_MNEMONIC))

    assert config.derivation_path_info.mnemonic_seed == derive_seed(ABANDON_MNEMONIC, "")
    assert "While ill-advised" in streams.stdout.getvalue()
    assert "Wallet configuration saved to" in streams.stderr.getvalue()


def test_config_file_supplies_options(tmp_path, data_directory):
    path = tmp_path / "options.json"
    path.write_text(json.dumps({"data_directory": str(data_directory), "word_count": 24}))
    args = build_parser()[0].parse_args([
        "wallet", "generate", "--config-file", str(path),
        "--mnemonic-passphrase", "", "--wallet-password", "pw",
    ])
    source = MnemonicSourceMock(ABANDON_MNEMONIC)

    cmd_wallet_generate(args, streams=make_streams(), mnemonic_source=source)

    assert source.make_parameters == [(WordCount.WORDS_24, Language.ENGLISH)]


def test_unreadable_config_file_exits_with_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["wallet", "generate", "--config-file", str(tmp_path / "booga.json")])

    assert excinfo.value.code == 1
    assert "could not be read" in capsys.readouterr().err


@pytest.mark.parametrize(
    "extra",
    [
        ["--word-count", "13"],
        ["--language", "Klingon"],
        ["--consuming-wallet", "not-a-path"],
        ["--earning-wallet", "0x1234"],
        ["--consuming-wallet", "m/44'/60'/0'/0/-1"],
        ["--earning-wallet", "m/2147483648'"],
    ],
)
def test_invalid_arguments_are_rejected_by_the_parser(data_directory, extra):
    with pytest.raises(SystemExit) as excinfo:
        main(generate_args(data_directory, *extra))

    assert excinfo.value.code == 2


@pytest.mark.parametrize("argv", [[], ["wallet"]])
def test_missing_command_prints_help(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code == 1
    assert "usage:" in capsys.readouterr().out


def test_show_without_wallet_creates_nothing(tmp_path, capsys):
    data_directory = tmp_path / "never-generated"

    main(["wallet", "show", "--data-directory", str(data_directory)])

    out, _ = capsys.readouterr()
    assert "No wallet stored" in out
    assert not data_directory.exists()
