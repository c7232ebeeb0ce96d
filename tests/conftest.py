# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con pares RSA generados una vez por sesión.
# --------------------------------------------------------------

import pytest

from cipherlab.core import crypto_asym, crypto_sign
from cipherlab.core.models import KeyPair


@pytest.fixture(scope="session")
def oaep_keypair() -> KeyPair:
    """Par RSA-OAEP de 4096 bits reutilizado por todas las pruebas.

    Returns:
        KeyPair: Claves en PEM; generarlas en cada test sería demasiado lento.
    """
    return crypto_asym.generate_keypair()


@pytest.fixture(scope="session")
def pss_keypair() -> KeyPair:
    """Par RSA-PSS de 4096 bits reutilizado por todas las pruebas.

    Returns:
        KeyPair: Claves en PEM para firmar y verificar.
    """
    return crypto_sign.generate_keypair()
