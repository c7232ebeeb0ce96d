# --------------------------------------------------------------
# File: test_crypto_sign.py
# Description: Pruebas para las firmas RSA-PSS y los digests SHA-256 informativos.
# --------------------------------------------------------------

import pytest
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding

from cipherlab.core import crypto_sign
from cipherlab.core.encoding import from_base64, to_base64, unframe_pem
from cipherlab.core.errors import EncodingError


def test_sign_verify_ok(pss_keypair):
    """Comprueba que la firma generada sea válida con la clave correspondiente.

    Returns:
        None: Las aserciones validan veredicto y digests.
    """
    data = b"mensaje importante"
    signed = crypto_sign.sign(data, pss_keypair.private_key)
    result = crypto_sign.verify(data, signed.signature, pss_keypair.public_key)
    assert result.valid is True
    assert result.verification_digest == signed.digest


def test_signature_uses_32_byte_salt(pss_keypair):
    """Verifica la firma con la primitiva directamente fijando la sal en 32 bytes.

    Returns:
        None: La verificación externa no debe lanzar excepción.
    """
    signed = crypto_sign.sign(b"abc", pss_keypair.private_key)
    der = from_base64(unframe_pem("PUBLIC KEY", pss_keypair.public_key))
    public_key = serialization.load_der_public_key(der)
    public_key.verify(
        from_base64(signed.signature),
        b"abc",
        padding.PSS(mgf=padding.MGF1(hashes.SHA256()), salt_length=32),
        hashes.SHA256(),
    )
    assert len(from_base64(signed.signature)) == 512


def test_verify_fails_if_message_tampered(pss_keypair):
    """Comprueba que alterar el mensaje invalide la firma y cambie el digest.

    Returns:
        None: Se espera valid=False y digests distintos.
    """
    signed = crypto_sign.sign(b"abc123", pss_keypair.private_key)
    result = crypto_sign.verify(b"abc124", signed.signature, pss_keypair.public_key)
    assert result.valid is False
    assert result.verification_digest != signed.digest


def test_verify_fails_with_other_key(pss_keypair, oaep_keypair):
    """Verifica que otra clave pública no valide la firma aunque el digest coincida.

    Returns:
        None: El digest igual no implica firma válida.
    """
    signed = crypto_sign.sign(b"hola", pss_keypair.private_key)
    result = crypto_sign.verify(b"hola", signed.signature, oaep_keypair.public_key)
    assert result.valid is False
    assert result.verification_digest == signed.digest


@pytest.mark.parametrize(
    "signature, public_key",
    [
        ("no es base64", None),
        ("QUJD", None),
        (None, "sin marcadores"),
        (None, "-----BEGIN PUBLIC KEY-----\nQUJD\n-----END PUBLIC KEY-----"),
    ],
)
def test_verify_degrades_to_false(pss_keypair, signature, public_key):
    """Garantiza que entradas mal formadas den valid=False sin excepción.

    Returns:
        None: Las aserciones validan el resultado negativo.
    """
    signature = signature or crypto_sign.sign(b"hola", pss_keypair.private_key).signature
    public_key = public_key or pss_keypair.public_key
    result = crypto_sign.verify(b"hola", signature, public_key)
    assert result.valid is False
    assert result.verification_digest == crypto_sign.digest(b"hola")


def test_tampered_signature_is_invalid(pss_keypair):
    """Comprueba que un bit alterado en la firma la invalide.

    Returns:
        None: Se espera valid=False.
    """
    raw = bytearray(from_base64(crypto_sign.sign(b"hola", pss_keypair.private_key).signature))
    raw[100] ^= 0x04
    assert crypto_sign.verify(b"hola", to_base64(bytes(raw)), pss_keypair.public_key).valid is False


def test_sign_rejects_malformed_private_key(pss_keypair):
    """Verifica que firmar con una clave privada mal formada lance EncodingError.

    Returns:
        None: Se espera la excepción tipada.
    """
    with pytest.raises(EncodingError):
        crypto_sign.sign(b"hola", pss_keypair.public_key)


def test_digest_determinism():
    """Comprueba que el digest sea determinista y distinga mensajes distintos.

    Returns:
        None: Las aserciones comparan digests.
    """
    assert crypto_sign.digest(b"m") == crypto_sign.digest(b"m")
    assert crypto_sign.digest(b"m") != crypto_sign.digest(b"m'")
    assert len(crypto_sign.digest(b"m")) == 64


def test_signatures_are_randomized(pss_keypair):
    """PSS usa sal aleatoria: dos firmas del mismo mensaje difieren y ambas valen.

    Returns:
        None: Las aserciones comparan ambas firmas.
    """
    first = crypto_sign.sign(b"hola", pss_keypair.private_key)
    second = crypto_sign.sign(b"hola", pss_keypair.private_key)
    assert first.signature != second.signature
    assert first.digest == second.digest
    for signed in (first, second):
        assert crypto_sign.verify(b"hola", signed.signature, pss_keypair.public_key).valid
