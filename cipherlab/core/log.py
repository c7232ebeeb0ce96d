# --------------------------------------------------------------
# File: log.py
# Description: Configuración de logging con filtrado de material criptográfico.
# --------------------------------------------------------------
"""Logging de la aplicación que nunca deja pasar claves, nonces ni firmas."""

from __future__ import annotations

import logging
import re
import sys
from typing import Optional

from cipherlab.core.config import LOG_LEVEL

__all__ = ["SecretRedactFilter", "configure_logging"]

# Secuencias base64 o hexadecimales largas: cuerpos PEM, claves, firmas, digests.
_SECRET_PATTERNS = (
    re.compile(r"[A-Za-z0-9+/]{24,}={0,2}"),
    re.compile(r"(?i)\b[a-f0-9]{32,}\b"),
)
_REDACTED = "[REDACTED]"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class SecretRedactFilter(logging.Filter):
    """Sustituye por `[REDACTED]` cualquier fragmento con aspecto de secreto.

    El registro siempre se conserva; sólo se sanea su mensaje.

    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        for pattern in _SECRET_PATTERNS:
            message = pattern.sub(_REDACTED, message)
        record.msg = message
        record.args = None
        return True


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Configura el logger raíz del paquete `cipherlab`.

    Args:
        level (Optional[str]): Nivel de logging; por defecto `CIPHERLAB_LOG_LEVEL`.

    Returns:
        logging.Logger: Logger del paquete ya configurado.

    """

    logger = logging.getLogger("cipherlab")
    logger.setLevel(level or LOG_LEVEL)
    # Los registros de los loggers hijos sólo pasan por los filtros del handler.
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler.addFilter(SecretRedactFilter())
        logger.addHandler(handler)
    return logger
