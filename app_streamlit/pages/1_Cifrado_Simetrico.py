# --------------------------------------------------------------
# File: 1_Cifrado_Simetrico.py
# Description: Cifrado y descifrado AES-GCM con passphrase o clave aleatoria.
# --------------------------------------------------------------

import streamlit as st

from cipherlab.api import services
from cipherlab.core.log import configure_logging

configure_logging()

st.title("🔒 Cifrado simétrico")
st.caption("AES-GCM | clave de 256 bits | nonce de 96 bits | tag de 128 bits")

message = st.text_area("Mensaje a cifrar")
passphrase = st.text_input(
    "Passphrase (opcional)",
    help="Si se deja vacía se genera una clave aleatoria. La passphrase se convierte con SHA-256.",
)
if st.button("Cifrar"):
    res = services.symmetric_encrypt(message, passphrase or None)
    if res.ok:
        st.session_state["sym_result"] = res.value
    else:
        st.error(res.message)

result = st.session_state.get("sym_result")
if result:
    st.markdown("### Resultado")
    st.code(result.bundle, language="text")
    st.write("**Clave (base64):**")
    st.code(result.key, language="text")

# Descifrado con los valores que el usuario pegue o edite.
st.markdown("### Descifrar")
bundle = st.text_area("Paquete cifrado (ciphertext.nonce)", value=result.bundle if result else "")
use_passphrase = st.checkbox("Usar passphrase en lugar de clave base64")
key_material = st.text_input(
    "Passphrase" if use_passphrase else "Clave (base64)",
    value="" if use_passphrase or not result else result.key,
)
if st.button("Descifrar"):
    res = services.symmetric_decrypt(bundle, key_material, is_passphrase=use_passphrase)
    if res.ok:
        st.success(res.value)
    else:
        st.error(res.message)
