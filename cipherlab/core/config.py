# --------------------------------------------------------------
# File: config.py
# Description: Parámetros de ejecución leídos del entorno o de un fichero .env.
# --------------------------------------------------------------
"""Configuración de la aplicación; los parámetros criptográficos no se configuran."""

import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("CIPHERLAB_LOG_LEVEL", "WARNING").upper()
APP_TITLE = os.getenv("CIPHERLAB_APP_TITLE", "CipherLab")
