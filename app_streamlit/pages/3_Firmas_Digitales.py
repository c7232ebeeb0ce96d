# --------------------------------------------------------------
# File: 3_Firmas_Digitales.py
# Description: Firma y verificación RSA-PSS con comparación visual de digests.
# --------------------------------------------------------------

import streamlit as st

from cipherlab.api import services
from cipherlab.core.log import configure_logging

configure_logging()

st.title("✍️ Firmas digitales")
st.caption("RSA-PSS | 4096 bits | SHA-256 | sal de 32 bytes")

if st.button("Generar par de claves"):
    with st.spinner("Generando claves RSA de 4096 bits..."):
        res = services.signature_generate_keys()
    st.session_state["sig_keys"] = res.value

keypair = st.session_state.get("sig_keys")
if not keypair:
    st.info("Genera un par de claves para empezar.")
    st.stop()

public_key = st.text_area("Clave pública", value=keypair.public_key, height=150)
private_key = st.text_area("Clave privada", value=keypair.private_key, height=150)
keypair = services.replace_key(keypair, public_key=public_key, private_key=private_key)
st.session_state["sig_keys"] = keypair

message = st.text_area("Mensaje a firmar")
if st.button("Firmar"):
    res = services.sign_message(message, keypair.private_key)
    if res.ok:
        st.session_state["sig_result"] = {"message": message, "signed": res.value}
    else:
        st.error(res.message)

signed_state = st.session_state.get("sig_result")
if signed_state:
    st.write("**Firma (base64):**")
    st.code(signed_state["signed"].signature, language="text")
    st.write("**Digest SHA-256 al firmar:**")
    st.code(signed_state["signed"].digest, language="text")

    # Modifica el mensaje para ver cómo cambia el digest y falla la verificación.
    received = st.text_area("Mensaje recibido", value=signed_state["message"])
    if st.button("Verificar"):
        res = services.verify_signature(received, signed_state["signed"].signature, keypair.public_key)
        if res.ok:
            verification = res.value
            st.write("**Digest SHA-256 al verificar:**")
            st.code(verification.verification_digest, language="text")
            st.write("**Firma:**", "✅ Válida" if verification.valid else "❌ No válida")
        else:
            st.error(res.message)
