"""Manual check: sign a message with a private key and verify it with the
matching public key or certificate, going through the base64 artifact form.

Key locations come from PRIVATE_KEY and CERT_PATH (a `.env` file works too).
"""
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Ensure project root is on sys.path so the local 'pksig' package can be imported when running this script directly
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pksig.crypto import codec, sign
from pksig.crypto.policy import get_policy


def main():
    load_dotenv()
    msg = b"The quick brown fox jumps over the lazy dog"

    priv_path = os.getenv("PRIVATE_KEY", "certs/private.key")
    cert_path = os.getenv("CERT_PATH", "certs/cert.crt")
    policy = get_policy(os.getenv("SIGNATURE_ALGORITHM", "RSA-SHA256"))

    print("Loading private key from:", priv_path)
    priv_pem = Path(priv_path).read_bytes()

    print(f"Signing message with {policy}...")
    sig = sign.sign_bytes(msg, priv_pem, policy)
    b64 = codec.encode_signature(sig)
    print("Signature (base64):", b64)

    print("Loading public key from:", cert_path)
    pub_pem = Path(cert_path).read_bytes()

    print("Verifying signature...")
    ok = sign.verify_bytes(msg, codec.decode_signature(b64), pub_pem, policy)
    print("Verification result:", ok)

    tampered = sign.verify_bytes(msg + b".", sig, pub_pem, policy)
    print("Tampered message accepted:", tampered)

    if not ok or tampered:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
