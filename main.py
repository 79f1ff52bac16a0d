"""
SymCrypt — command-line entry point.

Commands
────────
encrypt   – encrypt text; missing key / IV are generated
decrypt   – decrypt Base64 ciphertext; missing inputs are prompted for
ciphers   – list every registered standard / key size / mode

Examples:
    symcrypt encrypt -c AES-256-CBC -t "hello world"
    symcrypt decrypt -c AES-256-CBC -k KEY -i IV -t PHRASE
"""

import argparse
import logging
import sys

from config.settings import Settings

from core.crypto_engine import CipherFactory, SymCryptError
from core.models        import CipherType, SymmetricRequest
from core.observer      import LoggingObserver
from core.prompt        import ConsolePrompt, NonInteractivePrompt
from core.symmetric_services import SymmetricCryptographyService

from utils.log_setup import setup_logging


def cipher_type_arg(value: str) -> CipherType:
    try:
        return CipherType.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Argument parser
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="symcrypt",
        description="Symmetric (AES) encryption and decryption of text "
                    "with Base64 key / IV / ciphertext.",
    )
    parser.add_argument("--version", action="version",
                        version=f"{Settings.APP_NAME} {Settings.APP_VERSION}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # ── options shared by encrypt / decrypt ──────────────────────
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-c", "--cipher", type=cipher_type_arg,
                        default=cipher_type_arg(Settings.default_cipher()),
                        metavar="CIPHER",
                        help="STANDARD-SIZE-MODE, e.g. AES-128-ECB "
                             f"(default: {Settings.default_cipher()})")
    common.add_argument("-k", "--key", help="Base64 encryption key")
    common.add_argument("-i", "--iv", dest="initialization_vector",
                        help="Base64 initialization vector "
                             "(ignored in ECB mode)")
    common.add_argument("-t", "--text", dest="content",
                        help="Plaintext to encrypt / Base64 phrase to decrypt")
    common.add_argument("-v", "--verbose", action="store_true",
                        help="Echo log records to stderr")
    common.add_argument("--log-file", default=Settings.LOG_FILE,
                        help=f"Log file (default: {Settings.LOG_FILE})")

    subparsers.add_parser("encrypt", parents=[common],
                          help="Encrypt text")

    dec = subparsers.add_parser("decrypt", parents=[common],
                                help="Decrypt a Base64 phrase")
    dec.add_argument("--no-prompt", action="store_true",
                     help="Fail instead of asking for missing inputs")
    dec.add_argument("--hide-input", action="store_true",
                     help="Do not echo the key when prompted for it")

    subparsers.add_parser("ciphers", help="List supported ciphers")
    return parser


def build_request(args: argparse.Namespace) -> SymmetricRequest:
    return SymmetricRequest(
        cipher_type=args.cipher,
        is_encryption=args.command == "encrypt",
        key=args.key,
        initialization_vector=args.initialization_vector,
        content=args.content,
    )


def print_ciphers(factory: CipherFactory):
    print(f"{'Cipher':<16s} {'Key bits':>8s} {'IV bytes':>8s}  Padding")
    for info in factory.get_all_info():
        print(f"{info['name']:<16s} {info['key_bits']:>8d} "
              f"{info['iv_bytes']:>8d}  {info['padding']}")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Entry point
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(
        getattr(args, "log_file", Settings.LOG_FILE),
        level=Settings.LOG_LEVEL,
        fmt=Settings.LOG_FORMAT,
        max_bytes=Settings.LOG_MAX_BYTES,
        backup_count=Settings.LOG_BACKUP_COUNT,
        verbose=getattr(args, "verbose", False),
    )
    logger = logging.getLogger("SymCrypt.Main")
    logger.info("")
    logger.info("Operation started.")

    factory = CipherFactory()
    try:
        if args.command == "ciphers":
            print_ciphers(factory)
            return 0

        if args.command == "decrypt" and args.no_prompt:
            prompt = NonInteractivePrompt()
        else:
            prompt = ConsolePrompt(
                hide_secrets=getattr(args, "hide_input", False)
            )
        service = SymmetricCryptographyService(
            factory=factory, prompt=prompt, observer=LoggingObserver(),
        )
        result = service.process(build_request(args))
        print(result)
        return 0
    except SymCryptError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        logger.error("Operation failed: %s", exc, exc_info=True)
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nOperation cancelled.", file=sys.stderr)
        logger.warning("Operation cancelled by the operator.")
        return 130
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        logger.exception("Unexpected failure: %s", exc)
        return 1
    finally:
        logger.info("Operation complete.")


if __name__ == "__main__":
    sys.exit(main())
