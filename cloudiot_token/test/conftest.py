from aioresponses import aioresponses
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives.asymmetric import ec, rsa

import pytest

from .helpers import private_pem


@pytest.fixture
def responses_mock():
    with aioresponses() as m:
        yield m


@pytest.fixture(scope="session")
def rsa_keypair():
    private_key = rsa.generate_private_key(
        public_exponent=65537, key_size=2048, backend=default_backend()
    )
    public_key = private_key.public_key()

    return public_key, private_key


@pytest.fixture(scope="session")
def ec_keypair():
    private_key = ec.generate_private_key(ec.SECP256R1(), backend=default_backend())
    public_key = private_key.public_key()

    return public_key, private_key


@pytest.fixture
def rsa_key_file(tmp_path, rsa_keypair):
    _, private_key = rsa_keypair
    key_file = tmp_path / "rsa_private.pem"
    key_file.write_bytes(private_pem(private_key))
    return str(key_file)
