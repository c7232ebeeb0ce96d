# --------------------------------------------------------------
# File: __init__.py
# Description: Capa de servicios consumida por la interfaz de usuario.
# --------------------------------------------------------------
"""Servicios de frontera que traducen errores criptográficos en resultados."""

__all__ = ["services"]
