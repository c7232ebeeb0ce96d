# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del laboratorio.
# --------------------------------------------------------------

import streamlit as st

from cipherlab.core.config import APP_TITLE
from cipherlab.core.log import configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title=APP_TITLE, page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title(f"🔐 {APP_TITLE}")
st.write(
    "Laboratorio educativo de criptografía: cifrado simétrico AES-GCM, "
    "cifrado asimétrico RSA-OAEP y firmas digitales RSA-PSS con digests SHA-256."
)
st.info("Elige un flujo en la barra lateral. Ninguna clave se guarda fuera de esta sesión.")
