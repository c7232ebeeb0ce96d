# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM para cifrado y descifrado simétrico seguro.
# --------------------------------------------------------------
"""Cifrado simétrico AES-256-GCM con clave aleatoria o derivada de una passphrase."""

import hashlib
import logging
import os
from typing import Optional, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from cipherlab.core.encoding import from_base64, to_base64
from cipherlab.core.errors import DecryptionError, EncodingError
from cipherlab.core.models import SymmetricEncryption

logger = logging.getLogger(__name__)

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16
BUNDLE_SEPARATOR = "."

_DECRYPTION_FAILED = "Decryption failed"


def derive_passphrase_key(passphrase: str) -> bytes:
    """Convierte una passphrase en una clave AES de 256 bits.

    SECURITY: es un SHA-256 directo, sin sal ni iteraciones. No es un KDF
    adecuado; se mantiene para que las claves derivadas coincidan con las
    que ya circulan entre usuarios de la aplicación.

    Args:
        passphrase (str): Texto arbitrario introducido por el usuario.

    Returns:
        bytes: Clave de 32 bytes.

    Raises:
        EncodingError: Si la passphrase no puede codificarse en UTF-8.

    """

    try:
        data = passphrase.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError("La passphrase no es UTF-8 válido.") from exc
    return hashlib.sha256(data).digest()


def aes_gcm_encrypt_with_key(
    key: bytes, plaintext: bytes, aad: Optional[bytes] = None
) -> Tuple[bytes, bytes, bytes]:
    """Cifra datos con AES-GCM utilizando una clave proporcionada.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        plaintext (bytes): Datos a cifrar.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        Tuple[bytes, bytes, bytes]: Ciphertext sin etiqueta, nonce y tag.

    """

    nonce = os.urandom(NONCE_SIZE)
    aes = AESGCM(key)
    ct_full = aes.encrypt(nonce, plaintext, aad)
    tag = ct_full[-TAG_SIZE:]
    ciphertext = ct_full[:-TAG_SIZE]
    return ciphertext, nonce, tag


def aes_gcm_decrypt_with_key(
    key: bytes, nonce: bytes, ciphertext: bytes, tag: bytes, aad: Optional[bytes] = None
) -> bytes:
    """Descifra datos con AES-GCM utilizando la clave simétrica proporcionada.

    Args:
        key (bytes): Clave simétrica que protege los datos.
        nonce (bytes): Vector de inicialización de 96 bits.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación de 128 bits.
        aad (Optional[bytes]): Datos autenticados adicionales.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        cryptography.exceptions.InvalidTag: Si la autenticación falla.

    """

    aes = AESGCM(key)
    return aes.decrypt(nonce, ciphertext + tag, aad)


def encrypt(message: bytes, passphrase: Optional[str] = None) -> SymmetricEncryption:
    """Cifra un mensaje y devuelve el paquete ``ct.nonce`` junto a la clave.

    Args:
        message (bytes): Mensaje en claro.
        passphrase (Optional[str]): Si se indica, la clave es su SHA-256; si
            no, se genera una clave aleatoria de 256 bits.

    Returns:
        SymmetricEncryption: Paquete codificado y clave en base64.

    """

    key = derive_passphrase_key(passphrase) if passphrase else os.urandom(KEY_SIZE)
    ciphertext, nonce, tag = aes_gcm_encrypt_with_key(key, message)
    bundle = f"{to_base64(ciphertext + tag)}{BUNDLE_SEPARATOR}{to_base64(nonce)}"
    logger.debug(
        "AES-GCM-256 cifrado: %d bytes, clave %s",
        len(message),
        "derivada de passphrase" if passphrase else "aleatoria",
    )
    return SymmetricEncryption(bundle=bundle, key=to_base64(key))


def _split_bundle(bundle: str) -> Tuple[bytes, bytes]:
    """Separa y decodifica los dos campos de un paquete simétrico."""

    parts = bundle.split(BUNDLE_SEPARATOR)
    if len(parts) != 2:
        raise EncodingError("El paquete debe tener exactamente dos campos.")
    ct_full, nonce = from_base64(parts[0]), from_base64(parts[1])
    if len(nonce) != NONCE_SIZE or len(ct_full) < TAG_SIZE:
        raise EncodingError("Nonce o ciphertext con longitud inválida.")
    return ct_full, nonce


def _key_from_material(key_material: str, is_passphrase: bool) -> bytes:
    """Obtiene la clave AES a partir de una passphrase o de base64."""

    if is_passphrase:
        return derive_passphrase_key(key_material)
    key = from_base64(key_material)
    if len(key) != KEY_SIZE:
        raise EncodingError("La clave debe tener 256 bits.")
    return key


def decrypt(bundle: str, key_material: str, is_passphrase: bool = False) -> bytes:
    """Descifra un paquete ``base64(ct||tag).base64(nonce)``.

    Args:
        bundle (str): Paquete producido por :func:`encrypt`.
        key_material (str): Clave en base64 o passphrase.
        is_passphrase (bool): Indica si `key_material` debe derivarse con SHA-256.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        DecryptionError: Ante cualquier fallo de formato, clave o autenticación.

    """

    try:
        ct_full, nonce = _split_bundle(bundle)
        key = _key_from_material(key_material, is_passphrase)
        plaintext = aes_gcm_decrypt_with_key(key, nonce, ct_full[:-TAG_SIZE], ct_full[-TAG_SIZE:])
    except (EncodingError, InvalidTag, ValueError) as exc:
        logger.info("Descifrado AES-GCM rechazado (%s)", type(exc).__name__)
        raise DecryptionError(_DECRYPTION_FAILED) from exc
    return plaintext
