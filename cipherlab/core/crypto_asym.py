# --------------------------------------------------------------
# File: crypto_asym.py
# Description: Cifrado de clave pública RSA-OAEP y exportación de claves en PEM.
# --------------------------------------------------------------
"""Generación de pares RSA-4096, cifrado y descifrado RSA-OAEP con SHA-256."""

import logging

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from cipherlab.core.encoding import (
    PRIVATE_KEY_LABEL,
    PUBLIC_KEY_LABEL,
    frame_pem,
    from_base64,
    to_base64,
    unframe_pem,
)
from cipherlab.core.errors import DecryptionError, EncodingError, EncryptionError, ErrorCode
from cipherlab.core.models import KeyPair

logger = logging.getLogger(__name__)

KEY_SIZE_BITS = 4096
PUBLIC_EXPONENT = 65537
HASH_LEN = hashes.SHA256.digest_size

_DECRYPTION_FAILED = "Decryption failed"


def _oaep() -> padding.OAEP:
    return padding.OAEP(
        mgf=padding.MGF1(algorithm=hashes.SHA256()),
        algorithm=hashes.SHA256(),
        label=None,
    )


def export_keypair(private_key: rsa.RSAPrivateKey) -> KeyPair:
    """Exporta un par RSA como SPKI/PKCS8 en base64 enmarcado en PEM.

    Args:
        private_key (rsa.RSAPrivateKey): Clave privada recién generada.

    Returns:
        KeyPair: Par de cadenas PEM con un cuerpo base64 de una sola línea.

    """

    public_der = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    private_der = private_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    return KeyPair(
        public_key=frame_pem(PUBLIC_KEY_LABEL, to_base64(public_der)),
        private_key=frame_pem(PRIVATE_KEY_LABEL, to_base64(private_der)),
    )


def generate_rsa_private_key() -> rsa.RSAPrivateKey:
    """Genera una clave privada RSA de 4096 bits con exponente 65537."""

    return rsa.generate_private_key(public_exponent=PUBLIC_EXPONENT, key_size=KEY_SIZE_BITS)


def generate_keypair() -> KeyPair:
    """Genera un par RSA-OAEP listo para copiarse como texto.

    Returns:
        KeyPair: Clave pública y privada en PEM.

    """

    keypair = export_keypair(generate_rsa_private_key())
    logger.debug("Par RSA-%d generado para OAEP", KEY_SIZE_BITS)
    return keypair


def load_public_key(public_key_pem: str) -> rsa.RSAPublicKey:
    """Importa una clave pública RSA desde PEM con marcadores exactos.

    Args:
        public_key_pem (str): Texto PEM de la clave pública (SPKI).

    Returns:
        rsa.RSAPublicKey: Clave pública importada.

    Raises:
        EncodingError: Si el PEM, el base64 o la estructura SPKI no son válidos.

    """

    der = from_base64(unframe_pem(PUBLIC_KEY_LABEL, public_key_pem))
    try:
        key = serialization.load_der_public_key(der)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise EncodingError("La clave pública no es un SPKI válido.") from exc
    if not isinstance(key, rsa.RSAPublicKey):
        raise EncodingError("La clave pública no es RSA.")
    return key


def load_private_key(private_key_pem: str) -> rsa.RSAPrivateKey:
    """Importa una clave privada RSA desde PEM con marcadores exactos.

    Args:
        private_key_pem (str): Texto PEM de la clave privada (PKCS8).

    Returns:
        rsa.RSAPrivateKey: Clave privada importada.

    Raises:
        EncodingError: Si el PEM, el base64 o la estructura PKCS8 no son válidos.

    """

    der = from_base64(unframe_pem(PRIVATE_KEY_LABEL, private_key_pem))
    try:
        key = serialization.load_der_private_key(der, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise EncodingError("La clave privada no es un PKCS8 válido.") from exc
    if not isinstance(key, rsa.RSAPrivateKey):
        raise EncodingError("La clave privada no es RSA.")
    return key


def max_message_length(key_size_bits: int = KEY_SIZE_BITS) -> int:
    """Capacidad de RSA-OAEP/SHA-256: ``k - 2*hLen - 2`` bytes (446 para 4096 bits)."""

    return (key_size_bits + 7) // 8 - 2 * HASH_LEN - 2


def encrypt(message: bytes, public_key_pem: str) -> str:
    """Cifra un mensaje con RSA-OAEP y devuelve el criptograma en base64.

    Args:
        message (bytes): Mensaje en claro.
        public_key_pem (str): Clave pública del destinatario en PEM.

    Returns:
        str: Criptograma en base64.

    Raises:
        EncodingError: Si la clave pública está mal formada.
        EncryptionError: Con código ``MESSAGE_TOO_LONG`` si el mensaje supera
            la capacidad de OAEP para el módulo de la clave.

    """

    public_key = load_public_key(public_key_pem)
    limit = max_message_length(public_key.key_size)
    if len(message) > limit:
        raise EncryptionError(
            f"MessageTooLong: {len(message)} bytes > {limit} bytes",
            ErrorCode.MESSAGE_TOO_LONG,
        )
    try:
        ciphertext = public_key.encrypt(message, _oaep())
    except ValueError as exc:
        raise EncryptionError("Encryption failed") from exc
    logger.debug("RSA-OAEP cifrado: %d bytes", len(message))
    return to_base64(ciphertext)


def decrypt(ciphertext: str, private_key_pem: str) -> bytes:
    """Descifra un criptograma RSA-OAEP en base64.

    Clave mal formada, base64 inválido, clave equivocada y criptograma
    manipulado producen el mismo error.

    Args:
        ciphertext (str): Criptograma en base64.
        private_key_pem (str): Clave privada en PEM.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        DecryptionError: Ante cualquier fallo.

    """

    try:
        private_key = load_private_key(private_key_pem)
        plaintext = private_key.decrypt(from_base64(ciphertext), _oaep())
    except (EncodingError, ValueError) as exc:
        logger.info("Descifrado RSA-OAEP rechazado")
        raise DecryptionError(_DECRYPTION_FAILED) from exc
    return plaintext
