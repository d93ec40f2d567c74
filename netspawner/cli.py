"""
NetSpawner command line interface.

Usage:
    netspawner keygen [--mnemonic WORDS] [--passphrase PW] [--path 44/7337/0/0]
    netspawner sign --private-key B64 --message TEXT
    netspawner verify --public-key B58 --signature B64 --message TEXT
    netspawner resume [--home DIR]
    netspawner reset [--home DIR]
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .config import load_config
from .crypto import generate_key_box, is_valid_mnemonic, sign_message, verify_message
from .exceptions import NetSpawnerError
from .spawner import reset_network, resume_network
from .utils.validation import parse_derivation_path

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netspawner",
        description="NetSpawner - local blockchain network launcher",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", metavar="<command>")

    sub.add_parser("help", help="Show this help")

    keygen = sub.add_parser("keygen", help="Generate an Ed25519 key pair as JSON")
    keygen.add_argument(
        "--mnemonic", default="",
        help="Existing BIP39 mnemonic. If empty, a new 24-word phrase will be generated",
    )
    keygen.add_argument("--passphrase", default="", help="Optional mnemonic password")
    keygen.add_argument(
        "--path", default="",
        help="BIP44 derivation path numbers separated by '/' (default 44/7337/0/0)",
    )

    sign = sub.add_parser("sign", help="Sign a message with a base64 private key")
    sign.add_argument("--private-key", required=True, help="Base64 PKCS#8 private key")
    sign.add_argument("--message", required=True, help="Message to sign (UTF-8)")

    verify = sub.add_parser("verify", help="Verify a base64 signature")
    verify.add_argument("--public-key", required=True, help="Base58 public key")
    verify.add_argument("--signature", required=True, help="Base64 signature")
    verify.add_argument("--message", required=True, help="Signed message (UTF-8)")

    for name, text in (
        ("resume", "Resume network from the same point"),
        ("reset", "Reset and start the network from init (progress drop)"),
    ):
        cmd = sub.add_parser(name, help=text)
        cmd.add_argument("--home", default=".", help="Directory holding config.json")

    return parser


def _keygen(args: argparse.Namespace) -> int:
    path = parse_derivation_path(args.path)
    if args.mnemonic and not is_valid_mnemonic(args.mnemonic):
        logger.warning("Mnemonic is not a valid BIP39 English phrase; deriving anyway")

    box = generate_key_box(args.mnemonic, args.passphrase, path)
    print(box.to_json(indent=2))
    return 0


def _sign(args: argparse.Namespace) -> int:
    print(sign_message(args.private_key, args.message))
    return 0


def _verify(args: argparse.Namespace) -> int:
    valid = verify_message(args.message, args.public_key, args.signature)
    print("true" if valid else "false")
    return 0 if valid else 1


def _resume(args: argparse.Namespace) -> int:
    asyncio.run(resume_network(load_config(args.home)))
    return 0


def _reset(args: argparse.Namespace) -> int:
    asyncio.run(reset_network(load_config(args.home)))
    return 0


def _lower_command(argv: List[str]) -> List[str]:
    """Lower-case the command name so `Reset` and `reset` are the same."""
    argv = list(argv)
    for i, arg in enumerate(argv):
        if not arg.startswith("-"):
            argv[i] = arg.lower()
            break
    return argv


COMMANDS = {
    "keygen": _keygen,
    "sign": _sign,
    "verify": _verify,
    "resume": _resume,
    "reset": _reset,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(_lower_command(sys.argv[1:] if argv is None else argv))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    if args.command == "help":
        parser.print_help()
        return 0
    if args.command is None:
        parser.print_usage(sys.stderr)
        return 2

    try:
        return COMMANDS[args.command](args)
    except NetSpawnerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
