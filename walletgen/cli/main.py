"""Main CLI entry point"""

import sys
import argparse
from pathlib import Path

from ..core.config import Config, default_data_directory
from ..core.exceptions import WalletGenError
from ..core.logging_config import setup_logging
from ..core.persistence import DB_FILE_NAME, PersistentConfiguration
from ..core.types import Language, WordCount
from ..operations.wallet import WalletGenerator, create_wallet
from ..utils.console import Streams
from ..utils.validators import (
    validate_derivation_path,
    validate_earning_wallet,
    validate_language,
)

EARNING_WALLET_HELP = (
    "Either a 0x-prefixed address to receive earnings (nothing is derived), "
    "or a derivation path for an earning wallet derived from the new seed "
    "(default: m/44'/60'/0'/0/1)"
)


def _checked(validator):
    """Turn a validator returning an error message into an argparse type"""
    def convert(value):
        problem = validator(value)
        if problem:
            raise argparse.ArgumentTypeError(problem)
        return value
    return convert


def _cli_values(args):
    return {
        "data_directory": args.data_directory,
        "consuming_wallet": args.consuming_wallet,
        "earning_wallet": args.earning_wallet,
        "language": args.language,
        "word_count": args.word_count,
        "mnemonic_passphrase": args.mnemonic_passphrase,
        "wallet_password": args.wallet_password,
    }


def cmd_wallet_generate(args, streams=None, mnemonic_source=None):
    """Generate a new set of HD wallets with a mnemonic recovery phrase"""
    streams = streams or Streams.system()
    options = Config().resolve(_cli_values(args), config_file=args.config_file)

    with PersistentConfiguration.open(options.data_directory) as persistent_config:
        generator = WalletGenerator(mnemonic_source=mnemonic_source, streams=streams)
        config = generator.generate(options, persistent_config)
        create_wallet(config, persistent_config)
        location = persistent_config.path

    print(f"\n\nWallet configuration saved to {location}", file=streams.stderr)
    return config


def cmd_wallet_show(args, streams=None):
    """Show the stored, non-secret wallet configuration"""
    streams = streams or Streams.system()
    data_directory = (
        args.data_directory
        or Config().env_values().get("data_directory")
        or default_data_directory()
    )

    if not (Path(data_directory).expanduser() / DB_FILE_NAME).exists():
        print(f"No wallet stored in {data_directory}", file=streams.stdout)
        return

    with PersistentConfiguration.open(data_directory) as persistent_config:
        rows = [
            ("Data directory", str(data_directory)),
            ("Mnemonic seed", "stored (encrypted)" if persistent_config.has_stored_seed() else "none"),
            ("Consuming path", persistent_config.consuming_wallet_derivation_path or "-"),
            ("Earning path", persistent_config.earning_wallet_derivation_path or "-"),
            ("Earning wallet", persistent_config.earning_wallet_address or "-"),
        ]

    print("=" * 60, file=streams.stdout)
    for label, value in rows:
        print(f"  {label + ':':<16} {value}", file=streams.stdout)
    print("=" * 60, file=streams.stdout)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="walletgen",
        description="Generate HD wallets from a BIP39 mnemonic recovery phrase",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""examples:
  walletgen wallet generate                                   # 12 English words, default paths
  walletgen wallet generate --word-count 24 --language Español
  walletgen wallet generate --earning-wallet 0x0123456789012345678901234567890123456789
  walletgen wallet show                                       # What is stored

configuration:
  Options may also come from WALLETGEN_<OPTION> environment variables
  (a .env file is honoured) or from <data-directory>/config.json.
""",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log progress to stderr")
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # ── Top-level: wallet ──────────────────────────────────────────────
    wallet_parser = subparsers.add_parser("wallet", help="Wallet operations")
    wallet_sub = wallet_parser.add_subparsers(dest="wallet_type")

    gen = wallet_sub.add_parser("generate", help="Generate new consuming and earning wallets")
    gen.add_argument("--data-directory", help="Directory holding the wallet database (default: ~/.walletgen)")
    gen.add_argument("--config-file", help="JSON file with option values")
    gen.add_argument(
        "--consuming-wallet",
        type=_checked(validate_derivation_path),
        metavar="PATH",
        help="Derivation path of the consuming wallet (default: m/44'/60'/0'/0/0)",
    )
    gen.add_argument(
        "--earning-wallet",
        type=_checked(validate_earning_wallet),
        metavar="ADDRESS|PATH",
        help=EARNING_WALLET_HELP,
    )
    gen.add_argument(
        "--language",
        type=_checked(validate_language),
        help=f"Mnemonic wordlist language: {', '.join(Language.display_names())} (default: English)",
    )
    gen.add_argument(
        "--word-count",
        choices=[str(v) for v in WordCount.values()],
        help="Number of words in the mnemonic phrase (default: 12)",
    )
    gen.add_argument("--mnemonic-passphrase", help="Skip the interactive passphrase dialog")
    gen.add_argument("--wallet-password", help="Skip the interactive wallet password dialog")
    gen.set_defaults(func=cmd_wallet_generate)

    show = wallet_sub.add_parser("show", help="Show stored wallet configuration")
    show.add_argument("--data-directory", help="Directory holding the wallet database")
    show.set_defaults(func=cmd_wallet_show)

    return parser, wallet_parser


def main(argv=None):
    parser, wallet_parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "wallet" and not args.wallet_type:
        wallet_parser.print_help()
        sys.exit(1)

    setup_logging(verbose=args.verbose)

    try:
        args.func(args)
    except KeyboardInterrupt:
        print("\nCancelled.", file=sys.stderr)
        sys.exit(1)
    except WalletGenError as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
