"""Command line front end: encrypt or decrypt files and pipes.

Usage:
    teacrypt encrypt --key KEY --input plain.bin --output cipher.bin
    teacrypt decrypt --key KEY --encoding hex < cipher.txt
    teacrypt list
"""

from __future__ import annotations

import argparse
import base64
import binascii
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from teacrypt.adapters import CipherRegistry, create_cipher
from teacrypt.config import Settings, get_settings, normalize_log_level
from teacrypt.errors import CryptError
from teacrypt.observability import setup_logging

logger = logging.getLogger(__name__)

ENCODINGS = ("raw", "hex", "base64")


def _log_level_arg(value: str) -> str:
    try:
        return normalize_log_level(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _config_error_message(err: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in item['loc'])}: {item['msg']}" for item in err.errors()
    )


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="teacrypt", description="Encrypt and decrypt data with XXTEA.",
    )
    p.add_argument("--cipher", default=settings.cipher,
                   help=f"Cipher name (default: {settings.cipher})")
    p.add_argument("--log-level", type=_log_level_arg, default=settings.log_level,
                   help="Logging level (default: %(default)s)")
    p.add_argument("--log-format", choices=("text", "json"), default=settings.log_format)

    sub = p.add_subparsers(dest="command", required=True)
    for name, verb in (("encrypt", "Encrypt"), ("decrypt", "Decrypt")):
        cmd = sub.add_parser(name, help=f"{verb} input data")
        key_group = cmd.add_mutually_exclusive_group()
        key_group.add_argument("--key", help="Key as a UTF-8 string (default: $TEACRYPT_KEY)")
        key_group.add_argument("--key-file", type=Path, help="Read the key bytes from a file")
        cmd.add_argument("--input", type=Path, help="Input file (default: stdin)")
        cmd.add_argument("--output", type=Path, help="Output file (default: stdout)")
        cmd.add_argument("--encoding", choices=ENCODINGS, default=settings.encoding,
                         help="Text encoding of the ciphertext (default: %(default)s)")
    sub.add_parser("list", help="List available ciphers")
    return p


def _resolve_key(args: argparse.Namespace, settings: Settings) -> bytes:
    if args.key is not None:
        return args.key.encode("utf-8")
    if args.key_file is not None:
        return args.key_file.read_bytes().rstrip(b"\r\n")
    # An empty key is rejected by the cipher with EmptyKeyError.
    return settings.key_bytes() or b""


def _read_input(path: Path | None) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    return path.read_bytes()


def _write_output(path: Path | None, data: bytes) -> None:
    if path is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        path.write_bytes(data)


def encode_ciphertext(data: bytes, encoding: str) -> bytes:
    if encoding == "hex":
        return binascii.hexlify(data) + b"\n"
    if encoding == "base64":
        return base64.b64encode(data) + b"\n"
    return data


def decode_ciphertext(data: bytes, encoding: str) -> bytes:
    """Undo :func:`encode_ciphertext`. Raises ValueError on malformed text."""
    if encoding == "raw":
        return data
    text = b"".join(data.split())
    try:
        if encoding == "hex":
            return binascii.unhexlify(text)
        return base64.b64decode(text, validate=True)
    except binascii.Error as e:
        raise ValueError(f"Input is not valid {encoding}: {e}") from e


def _list_ciphers() -> None:
    for name, cipher_cls in sorted(CipherRegistry.all_ciphers().items()):
        print(f"{name}\t{cipher_cls.info().description}")


def main(argv: list[str] | None = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"teacrypt: invalid configuration: {_config_error_message(e)}", file=sys.stderr)
        return 2
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    handler = setup_logging(args.log_level, args.log_format)
    try:
        if args.command == "list":
            _list_ciphers()
            return 0

        cipher = create_cipher(args.cipher)
        key = _resolve_key(args, settings)
        data = _read_input(args.input)

        if args.command == "encrypt":
            out = encode_ciphertext(cipher.encrypt(data, key), args.encoding)
        else:
            try:
                data = decode_ciphertext(data, args.encoding)
            except ValueError as e:
                parser.error(str(e))
            out = cipher.decrypt(data, key)

        _write_output(args.output, out)
        logger.info(
            "%s finished", args.command,
            extra={"cipher": args.cipher, "input_bytes": len(data), "output_bytes": len(out)},
        )
        return 0
    except CryptError as e:
        print(f"teacrypt: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        # Unreadable key/input or unwritable output.
        print(f"teacrypt: {e}", file=sys.stderr)
        return 2
    finally:
        logging.root.removeHandler(handler)


if __name__ == "__main__":
    sys.exit(main())
