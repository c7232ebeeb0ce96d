# --------------------------------------------------------------
# File: services.py
# Description: Servicios de cifrado y firma consumidos por la interfaz de usuario.
# --------------------------------------------------------------
"""Funciones de la capa de servicios: cadenas de texto de entrada y resultados.

Cada servicio ejecuta una única operación de `cipherlab.core`. Los errores
tipados se capturan aquí y se devuelven como `OperationResult` con
``ok=False``; ninguna entrada del usuario puede provocar una excepción.
"""

import logging
from typing import Callable, Optional

from cipherlab.core import crypto_asym, crypto_sign, crypto_sym
from cipherlab.core.errors import CipherLabError, DecryptionError, EncodingError, ErrorCode
from cipherlab.core.models import KeyPair, OperationResult

logger = logging.getLogger(__name__)

# Mensajes visibles en la interfaz por código de error.
USER_MESSAGES = {
    ErrorCode.ENCODING: "Formato de entrada no válido.",
    ErrorCode.ENCRYPTION: "No se ha podido cifrar el mensaje.",
    ErrorCode.MESSAGE_TOO_LONG: (
        f"El mensaje supera los {crypto_asym.max_message_length()} bytes que admite RSA-OAEP."
    ),
    ErrorCode.DECRYPTION: "No se ha podido descifrar el mensaje.",
}


def _utf8(message: str) -> bytes:
    """Codifica el texto del usuario en UTF-8."""

    try:
        return message.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise EncodingError("El mensaje no es UTF-8 válido.") from exc


def _text(plaintext: bytes) -> str:
    """Decodifica un claro recuperado; si no es UTF-8 se trata como fallo de descifrado."""

    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecryptionError("Decryption failed") from exc


def _run(operation: str, action: Callable[[], object]) -> OperationResult:
    """Ejecuta `action` y convierte cualquier `CipherLabError` en un resultado fallido.

    Args:
        operation (str): Nombre de la operación, sólo para el log.
        action (Callable[[], object]): Operación sin argumentos que produce el valor.

    Returns:
        OperationResult: ``ok=True`` con el valor, o ``ok=False`` con el código.

    """

    try:
        value = action()
    except CipherLabError as exc:
        logger.warning("%s fallida: %s", operation, exc.code.value)
        return OperationResult(ok=False, error=exc.code, message=USER_MESSAGES[exc.code])
    return OperationResult(ok=True, value=value)


def symmetric_encrypt(message: str, passphrase: Optional[str] = None) -> OperationResult:
    """Cifra con AES-GCM; el valor es un `SymmetricEncryption`.

    Args:
        message (str): Texto en claro.
        passphrase (Optional[str]): Passphrase opcional; vacía equivale a clave aleatoria.

    Returns:
        OperationResult: Paquete ``ct.nonce`` y clave en base64.

    """

    return _run("symmetric_encrypt", lambda: crypto_sym.encrypt(_utf8(message), passphrase))


def symmetric_decrypt(bundle: str, key_material: str, is_passphrase: bool = False) -> OperationResult:
    """Descifra un paquete AES-GCM; el valor es el texto en claro."""

    return _run(
        "symmetric_decrypt",
        lambda: _text(crypto_sym.decrypt(bundle, key_material, is_passphrase)),
    )


def asymmetric_generate_keys() -> OperationResult:
    """Genera un par RSA-OAEP; el valor es un `KeyPair`."""

    return _run("asymmetric_generate_keys", crypto_asym.generate_keypair)


def asymmetric_encrypt(message: str, public_key_pem: str) -> OperationResult:
    """Cifra con RSA-OAEP; el valor es el criptograma en base64."""

    return _run(
        "asymmetric_encrypt",
        lambda: crypto_asym.encrypt(_utf8(message), public_key_pem),
    )


def asymmetric_decrypt(ciphertext: str, private_key_pem: str) -> OperationResult:
    """Descifra con RSA-OAEP; el valor es el texto en claro."""

    return _run(
        "asymmetric_decrypt",
        lambda: _text(crypto_asym.decrypt(ciphertext, private_key_pem)),
    )


def asymmetric_quick_demo(message: str) -> OperationResult:
    """Genera un par nuevo y cifra el mensaje en un solo paso.

    Returns:
        OperationResult: Valor ``{"keypair": KeyPair, "ciphertext": str}``.

    """

    def action():
        keypair = crypto_asym.generate_keypair()
        return {"keypair": keypair, "ciphertext": crypto_asym.encrypt(_utf8(message), keypair.public_key)}

    return _run("asymmetric_quick_demo", action)


def signature_generate_keys() -> OperationResult:
    """Genera un par RSA-PSS; el valor es un `KeyPair`."""

    return _run("signature_generate_keys", crypto_sign.generate_keypair)


def sign_message(message: str, private_key_pem: str) -> OperationResult:
    """Firma el mensaje; el valor es un `SignedMessage` con firma y digest."""

    return _run("sign_message", lambda: crypto_sign.sign(_utf8(message), private_key_pem))


def verify_signature(message: str, signature: str, public_key_pem: str) -> OperationResult:
    """Verifica una firma; el valor es un `Verification`.

    Una firma inválida no es un error: el resultado es ``ok=True`` con
    ``value.valid`` a ``False``.

    """

    return _run(
        "verify_signature",
        lambda: crypto_sign.verify(_utf8(message), signature, public_key_pem),
    )


def signature_quick_demo(message: str) -> OperationResult:
    """Genera un par nuevo y firma el mensaje en un solo paso.

    Returns:
        OperationResult: Valor ``{"keypair": KeyPair, "signed": SignedMessage}``.

    """

    def action():
        keypair = crypto_sign.generate_keypair()
        return {"keypair": keypair, "signed": crypto_sign.sign(_utf8(message), keypair.private_key)}

    return _run("signature_quick_demo", action)


def replace_key(keypair: KeyPair, public_key: Optional[str] = None, private_key: Optional[str] = None) -> KeyPair:
    """Sustituye por completo una o ambas mitades de un par editado por el usuario.

    No valida nada: la clave editada se comprobará en su siguiente uso.

    """

    if public_key is not None:
        keypair = keypair.with_public_key(public_key)
    if private_key is not None:
        keypair = keypair.with_private_key(private_key)
    return keypair
