# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía de errores de la capa criptográfica.
# --------------------------------------------------------------
"""Excepciones tipadas que la capa de servicios convierte en resultados."""

from enum import Enum
from typing import Optional


class ErrorCode(str, Enum):
    """Códigos estables que la interfaz puede mostrar o comparar."""

    ENCODING = "ENCODING"
    ENCRYPTION = "ENCRYPTION"
    MESSAGE_TOO_LONG = "MESSAGE_TOO_LONG"
    DECRYPTION = "DECRYPTION"


class CipherLabError(Exception):
    """Error base de CipherLab."""

    code = ErrorCode.ENCODING

    def __init__(self, message: str, code: Optional[ErrorCode] = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class EncodingError(CipherLabError):
    """Estructura base64 o PEM mal formada."""

    code = ErrorCode.ENCODING


class EncryptionError(CipherLabError):
    """El cifrado no puede completarse (p. ej. mensaje demasiado largo para OAEP)."""

    code = ErrorCode.ENCRYPTION


class DecryptionError(CipherLabError):
    """Fallo de autenticación o de relleno.

    Cubre por igual la manipulación del criptograma y el uso de una clave
    equivocada; el mensaje nunca indica cuál de las comprobaciones falló.

    """

    code = ErrorCode.DECRYPTION
