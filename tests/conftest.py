import os
from datetime import datetime, timedelta, timezone

import pytest
from cryptography import x509
from cryptography.x509.oid import NameOID
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa


DATA_DIR = os.path.join(os.path.dirname(__file__), "data")


def data_path(name: str) -> str:
    return os.path.join(DATA_DIR, name)


def _private_pem(key, fmt=serialization.PrivateFormat.PKCS8, encryption=None) -> bytes:
    return key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=fmt,
        encryption_algorithm=encryption or serialization.NoEncryption(),
    )


def _public_pem(key) -> bytes:
    return key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def _self_signed_cert_pem(key, cn: str) -> bytes:
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, cn)])
    now = datetime.now(timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(minutes=1))
        .not_valid_after(now + timedelta(days=30))
        .sign(private_key=key, algorithm=hashes.SHA256())
    )
    return cert.public_bytes(serialization.Encoding.PEM)


class KeyPair:
    def __init__(self, key, cn: str):
        self.key = key
        self.private_pem = _private_pem(key)
        self.public_pem = _public_pem(key)
        self.cert_pem = _self_signed_cert_pem(key, cn)


@pytest.fixture(scope="session")
def rsa_pair() -> KeyPair:
    return KeyPair(rsa.generate_private_key(public_exponent=65537, key_size=2048), "signer.local")


@pytest.fixture(scope="session")
def other_rsa_pair() -> KeyPair:
    return KeyPair(rsa.generate_private_key(public_exponent=65537, key_size=2048), "other.local")


@pytest.fixture(scope="session")
def ec_key():
    return ec.generate_private_key(ec.SECP256R1())


@pytest.fixture
def hello_files():
    """Fixed RSA-2048 key pair plus an OpenSSL-made signature of 'hello world'."""
    files = {
        "data": data_path("hello.txt"),
        "private_key": data_path("hello-private.key"),
        "public_key": data_path("hello-public.pem"),
        "cert": data_path("hello-cert.crt"),
        "signature": data_path("hello.txt.sig"),
    }
    missing = [p for p in files.values() if not os.path.exists(p)]
    assert not missing, f"fixture files missing from tests/data: {missing}"
    return files
