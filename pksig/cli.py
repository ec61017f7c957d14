"""Command line front end: sign a file with a private key, or verify a
signature file with a public key or certificate.

Usage:
  pksig sign   DATA PRIVATE_KEY SIGNATURE_OUT
  pksig verify DATA SIGNATURE PUBLIC_KEY

Exit status is 0 on success. For `verify`, success means the signature
checked out; a rejected signature, unreadable file, bad key or malformed
signature file all exit with 1.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from pksig.config import Settings, load_settings
from pksig.crypto import codec
from pksig.crypto import sign as sign_mod
from pksig.crypto.errors import PksigError
from pksig.crypto.policy import AlgorithmPolicy, available_policies, get_policy
from pksig.diagnostics import Diagnostics

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _read(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def run_sign(data_path: str, key_path: str, signature_path: str, policy: AlgorithmPolicy, *, password: Optional[bytes] = None, diag: Optional[Diagnostics] = None) -> str:
    """Sign the file at `data_path` and write the base64 artifact.

    Returns the encoded signature that was written.
    """
    diag = diag or Diagnostics()
    diag.policy(policy)

    data = _read(data_path)
    diag.loaded("data", data_path, len(data))
    diag.data(data)

    private_pem = _read(key_path)
    diag.loaded("private key", key_path, len(private_pem))
    diag.private_key(private_pem)

    raw = sign_mod.sign_bytes(data, private_pem, policy, password=password)
    encoded = codec.encode_signature(raw)
    diag.signature(raw, encoded)

    # artifact is the bare base64 text, no trailing newline
    with open(signature_path, "wb") as f:
        f.write(encoded.encode("ascii"))
    return encoded


def run_verify(data_path: str, signature_path: str, key_path: str, policy: AlgorithmPolicy, *, diag: Optional[Diagnostics] = None) -> bool:
    """Check the artifact at `signature_path` against the data file."""
    diag = diag or Diagnostics()
    diag.policy(policy)

    data = _read(data_path)
    diag.loaded("data", data_path, len(data))
    diag.data(data)

    encoded = _read(signature_path)
    diag.loaded("signature", signature_path, len(encoded))

    public_pem = _read(key_path)
    diag.loaded("public key", key_path, len(public_pem))
    diag.public_key(public_pem)

    raw = codec.decode_signature(encoded)
    diag.signature(raw)

    valid = sign_mod.verify_bytes(data, raw, public_pem, policy)
    diag.verdict(valid)
    return valid


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pksig",
        description="Sign data with a private key or verify it with a public key / certificate.",
    )
    parser.add_argument(
        "--algorithm",
        default=settings.algorithm,
        help=f"signature algorithm shared by signer and verifier (default: {settings.algorithm}; "
        f"available: {', '.join(available_policies())})",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="logging level (default: %(default)s)")
    parser.add_argument("-v", "--verbose", action="store_true", help="trace every step at DEBUG level")

    sub = parser.add_subparsers(dest="command", metavar="{sign,verify}")
    sub.required = True

    p_sign = sub.add_parser("sign", help="sign a data file")
    p_sign.add_argument("data", help="data file to sign")
    p_sign.add_argument("private_key", help="PEM private key file")
    p_sign.add_argument("signature", help="where to write the base64 signature")

    p_verify = sub.add_parser("verify", help="verify a signature file")
    p_verify.add_argument("data", help="data file that was signed")
    p_verify.add_argument("signature", help="base64 signature file")
    p_verify.add_argument("public_key", help="PEM public key or certificate file")
    return parser


def _configure_logging(level_name: str, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, str(level_name).upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("pksig").setLevel(level)


def main(argv: Optional[Sequence[str]] = None) -> int:
    settings = load_settings()
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    _configure_logging(args.log_level, args.verbose)

    try:
        policy = get_policy(args.algorithm)
        if args.command == "sign":
            run_sign(args.data, args.private_key, args.signature, policy, password=settings.key_password)
            print(f"Signature saved to '{args.signature}'")
            return EXIT_OK

        valid = run_verify(args.data, args.signature, args.public_key, policy)
        print("Signature valid?", valid)
        return EXIT_OK if valid else EXIT_FAILURE
    except (PksigError, OSError) as exc:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
