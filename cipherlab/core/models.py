# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from cipherlab.core.errors import ErrorCode


class SymmetricEncryption(BaseModel):
    """Representa el resultado de un cifrado AES-GCM.

    Attributes:
        bundle (str): ``base64(ciphertext||tag) "." base64(nonce)``.
        key (str): Clave AES de 256 bits en base64.

    """

    model_config = ConfigDict(frozen=True)

    bundle: str
    key: str


class KeyPair(BaseModel):
    """Par de claves RSA enmarcadas en PEM.

    Las dos mitades son cadenas opacas: el usuario puede sustituir cualquiera
    de ellas y la coherencia del par sólo se comprueba en el siguiente uso.

    Attributes:
        public_key (str): Clave pública SPKI enmarcada en PEM.
        private_key (str): Clave privada PKCS8 enmarcada en PEM.

    """

    model_config = ConfigDict(frozen=True)

    public_key: str
    private_key: str

    def with_public_key(self, public_key: str) -> "KeyPair":
        """Devuelve una copia con la clave pública sustituida tal cual."""

        return self.model_copy(update={"public_key": public_key})

    def with_private_key(self, private_key: str) -> "KeyPair":
        """Devuelve una copia con la clave privada sustituida tal cual."""

        return self.model_copy(update={"private_key": private_key})


class SignedMessage(BaseModel):
    """Firma RSA-PSS junto con el digest SHA-256 informativo del mensaje."""

    model_config = ConfigDict(frozen=True)

    signature: str
    digest: str


class Verification(BaseModel):
    """Resultado de verificar una firma.

    Attributes:
        valid (bool): Veredicto de RSA-PSS; es lo único con valor de seguridad.
        verification_digest (str): SHA-256 del mensaje recibido, sólo para
            comparación visual con el digest del momento de la firma.

    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    verification_digest: str


class OperationResult(BaseModel):
    """Resultado que la capa de servicios entrega a la interfaz.

    Attributes:
        ok (bool): Indicador de éxito.
        value (Optional[Any]): Valor producido cuando ``ok`` es verdadero.
        error (Optional[ErrorCode]): Código del fallo cuando ``ok`` es falso.
        message (str): Texto breve apto para mostrar al usuario.

    """

    ok: bool
    value: Optional[Any] = None
    error: Optional[ErrorCode] = None
    message: str = ""
