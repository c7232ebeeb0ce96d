# --------------------------------------------------------------
# File: crypto_sign.py
# Description: Funciones para gestionar claves y firmas RSA-PSS con digest SHA-256.
# --------------------------------------------------------------
"""Firmas RSA-PSS (SHA-256, sal de 32 bytes) y digests para detectar cambios."""

import logging

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from cipherlab.core.crypto_asym import (
    KEY_SIZE_BITS,
    export_keypair,
    generate_rsa_private_key,
    load_private_key,
    load_public_key,
)
from cipherlab.core.encoding import from_base64, sha256_hex, to_base64
from cipherlab.core.errors import EncodingError
from cipherlab.core.models import KeyPair, SignedMessage, Verification

logger = logging.getLogger(__name__)

SALT_LENGTH = 32


def _pss() -> padding.PSS:
    return padding.PSS(mgf=padding.MGF1(hashes.SHA256()), salt_length=SALT_LENGTH)


def generate_keypair() -> KeyPair:
    """Genera un par RSA-4096 destinado a firmar y verificar.

    Returns:
        KeyPair: Clave pública y privada en PEM.

    """

    keypair = export_keypair(generate_rsa_private_key())
    logger.debug("Par RSA-%d generado para PSS", KEY_SIZE_BITS)
    return keypair


def digest(message: bytes) -> str:
    """SHA-256 del mensaje en hexadecimal; sólo informativo, no verifica nada."""

    return sha256_hex(message)


def sign(message: bytes, private_key_pem: str) -> SignedMessage:
    """Firma los bytes exactos del mensaje con RSA-PSS.

    Args:
        message (bytes): Mensaje que se firmará.
        private_key_pem (str): Clave privada en PEM.

    Returns:
        SignedMessage: Firma en base64 y digest SHA-256 del momento de la firma.

    Raises:
        EncodingError: Si la clave privada está mal formada o no admite PSS.

    """

    private_key = load_private_key(private_key_pem)
    try:
        signature = private_key.sign(message, _pss(), hashes.SHA256())
    except ValueError as exc:
        raise EncodingError("La clave privada es demasiado corta para RSA-PSS.") from exc
    logger.debug("Firma RSA-PSS generada sobre %d bytes", len(message))
    return SignedMessage(signature=to_base64(signature), digest=digest(message))


def verify(message: bytes, signature: str, public_key_pem: str) -> Verification:
    """Verifica una firma RSA-PSS y recalcula el digest del mensaje recibido.

    El veredicto y el digest son independientes: que los digests coincidan
    no significa que la firma sea válida. Cualquier fallo de decodificación
    o de la primitiva se traduce en ``valid=False``.

    Args:
        message (bytes): Mensaje recibido.
        signature (str): Firma en base64.
        public_key_pem (str): Clave pública del firmante en PEM.

    Returns:
        Verification: Veredicto y digest de verificación.

    """

    verification_digest = digest(message)
    try:
        public_key = load_public_key(public_key_pem)
        public_key.verify(from_base64(signature), message, _pss(), hashes.SHA256())
        valid = True
    except (EncodingError, InvalidSignature, ValueError) as exc:
        logger.info("Firma RSA-PSS no válida (%s)", type(exc).__name__)
        valid = False
    return Verification(valid=valid, verification_digest=verification_digest)
