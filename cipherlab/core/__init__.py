# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete core.
# --------------------------------------------------------------
"""Inicializa el paquete `core` y documenta sus módulos principales."""

__all__ = [
    "config",
    "crypto_asym",
    "crypto_sign",
    "crypto_sym",
    "encoding",
    "errors",
    "log",
    "models",
]
