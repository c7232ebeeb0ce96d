# --------------------------------------------------------------
# File: __init__.py
# Description: Paquete raíz de CipherLab, laboratorio criptográfico educativo.
# --------------------------------------------------------------
"""CipherLab: cifrado simétrico, asimétrico y firmas digitales para aprender."""

__version__ = "1.0.0"
