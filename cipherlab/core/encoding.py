# --------------------------------------------------------------
# File: encoding.py
# Description: Codificación base64, enmarcado PEM y huellas SHA-256 en hexadecimal.
# --------------------------------------------------------------
"""Utilidades de codificación compartidas por los tres flujos criptográficos."""

import base64
import hashlib

from cipherlab.core.errors import EncodingError

__all__ = [
    "PRIVATE_KEY_LABEL",
    "PUBLIC_KEY_LABEL",
    "frame_pem",
    "from_base64",
    "sha256_hex",
    "to_base64",
    "unframe_pem",
]

PUBLIC_KEY_LABEL = "PUBLIC KEY"
PRIVATE_KEY_LABEL = "PRIVATE KEY"


def _markers(label: str):
    """Devuelve la cabecera y el pie PEM literales para `label`."""

    return f"-----BEGIN {label}-----\n", f"\n-----END {label}-----"


def to_base64(data: bytes) -> str:
    """Codifica bytes en base64 estándar con relleno.

    Args:
        data (bytes): Datos binarios a codificar.

    Returns:
        str: Representación base64 en ASCII.

    """

    return base64.b64encode(data).decode("ascii")


def from_base64(value: str) -> bytes:
    """Decodifica base64 estándar validando alfabeto y relleno.

    Args:
        value (str): Texto base64 proporcionado por el usuario.

    Returns:
        bytes: Datos binarios decodificados.

    Raises:
        EncodingError: Si el texto contiene caracteres fuera del alfabeto
            o el relleno es incorrecto.

    """

    try:
        return base64.b64decode(value, validate=True)
    except (TypeError, ValueError) as exc:
        raise EncodingError("Base64 inválido.") from exc


def frame_pem(label: str, base64_body: str) -> str:
    """Enmarca un cuerpo base64 con las líneas BEGIN/END de `label`.

    Args:
        label (str): Etiqueta PEM, p. ej. ``"PUBLIC KEY"``.
        base64_body (str): Cuerpo base64 en una sola línea.

    Returns:
        str: Texto PEM con un único salto de línea antes y después del cuerpo.

    """

    header, footer = _markers(label)
    return f"{header}{base64_body}{footer}"


def unframe_pem(label: str, text: str) -> str:
    """Extrae el cuerpo base64 de un texto PEM con marcadores exactos.

    Args:
        label (str): Etiqueta esperada.
        text (str): Texto PEM tal como lo entregó el usuario.

    Returns:
        str: Cuerpo base64 sin los marcadores.

    Raises:
        EncodingError: Si falta la cabecera o el pie literal de `label`.

    """

    header, footer = _markers(label)
    if not isinstance(text, str) or not text.startswith(header) or not text.endswith(footer):
        raise EncodingError(f"Faltan los marcadores PEM de {label}.")
    body = text[len(header) : len(text) - len(footer)]
    if not body:
        raise EncodingError(f"El bloque PEM de {label} está vacío.")
    return body


def sha256_hex(data: bytes) -> str:
    """Calcula SHA-256 y lo devuelve en hexadecimal en minúsculas (64 caracteres)."""

    return hashlib.sha256(data).hexdigest()
