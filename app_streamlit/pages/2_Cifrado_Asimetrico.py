# --------------------------------------------------------------
# File: 2_Cifrado_Asimetrico.py
# Description: Generación de pares RSA-OAEP, cifrado y descifrado de clave pública.
# --------------------------------------------------------------

import streamlit as st

from cipherlab.api import services
from cipherlab.core.crypto_asym import max_message_length
from cipherlab.core.log import configure_logging

configure_logging()

st.title("🗝️ Cifrado asimétrico")
st.caption(f"RSA-OAEP | 4096 bits | SHA-256 | máximo {max_message_length()} bytes por mensaje")

if st.button("Generar par de claves"):
    with st.spinner("Generando claves RSA de 4096 bits..."):
        res = services.asymmetric_generate_keys()
    st.session_state["asym_keys"] = res.value

keypair = st.session_state.get("asym_keys")
if keypair:
    # Las claves editadas se sustituyen completas y se validan al usarse.
    public_key = st.text_area("Clave pública", value=keypair.public_key, height=150)
    private_key = st.text_area("Clave privada", value=keypair.private_key, height=150)
    keypair = services.replace_key(keypair, public_key=public_key, private_key=private_key)
    st.session_state["asym_keys"] = keypair

    message = st.text_area("Mensaje a cifrar")
    if st.button("Cifrar"):
        res = services.asymmetric_encrypt(message, keypair.public_key)
        if res.ok:
            st.session_state["asym_ct"] = res.value
        else:
            st.error(res.message)

    ciphertext = st.text_area("Criptograma (base64)", value=st.session_state.get("asym_ct", ""))
    if st.button("Descifrar"):
        res = services.asymmetric_decrypt(ciphertext, keypair.private_key)
        if res.ok:
            st.success(res.value)
        else:
            st.error(res.message)
else:
    st.info("Genera un par de claves para empezar.")
