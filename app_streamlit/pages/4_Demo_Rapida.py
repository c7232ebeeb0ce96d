# --------------------------------------------------------------
# File: 4_Demo_Rapida.py
# Description: Recorrido en un paso: claves nuevas, cifrado y firma del mismo mensaje.
# --------------------------------------------------------------

import streamlit as st

from cipherlab.api import services
from cipherlab.core.log import configure_logging

configure_logging()

st.title("⚡ Demo rápida")
st.write("Cada botón genera un par de claves nuevo y lo usa inmediatamente.")

message = st.text_area("Mensaje")

col1, col2 = st.columns(2)
with col1:
    if st.button("Cifrar con RSA-OAEP"):
        with st.spinner("Generando claves y cifrando..."):
            res = services.asymmetric_quick_demo(message)
        if res.ok:
            st.session_state["quick_asym"] = res.value
        else:
            st.error(res.message)
with col2:
    if st.button("Firmar con RSA-PSS"):
        with st.spinner("Generando claves y firmando..."):
            res = services.signature_quick_demo(message)
        if res.ok:
            st.session_state["quick_sig"] = {"message": message, **res.value}
        else:
            st.error(res.message)

quick_asym = st.session_state.get("quick_asym")
if quick_asym:
    st.markdown("### Cifrado")
    st.code(quick_asym["ciphertext"], language="text")
    if st.button("Descifrar"):
        res = services.asymmetric_decrypt(quick_asym["ciphertext"], quick_asym["keypair"].private_key)
        if res.ok:
            st.success(res.value)
        else:
            st.error(res.message)

quick_sig = st.session_state.get("quick_sig")
if quick_sig:
    st.markdown("### Firma")
    st.code(quick_sig["signed"].signature, language="text")
    st.caption(f"SHA-256: {quick_sig['signed'].digest}")
    if st.button("Verificar"):
        res = services.verify_signature(
            quick_sig["message"], quick_sig["signed"].signature, quick_sig["keypair"].public_key
        )
        if res.ok:
            st.write("**Firma:**", "✅ Válida" if res.value.valid else "❌ No válida")
        else:
            st.error(res.message)
