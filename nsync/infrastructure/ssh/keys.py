"""SSH key material via paramiko."""

from io import StringIO

import logfire
import paramiko

from nsync.domain.recipe.port.key_factory import KeyFactory, KeyPair
from nsync.domain.shared.error import KeyGenerationFailed


class RSAKeyPair(KeyPair):
    """An RSA key pair rendered the way the SSH daemon and proxy consume it."""

    def __init__(self, key: paramiko.RSAKey):
        self._key = key

    def pem_encoded_private_key(self) -> str:
        buf = StringIO()
        self._key.write_private_key(buf)
        return buf.getvalue()

    def authorized_key(self) -> str:
        return f"{self._key.get_name()} {self._key.get_base64()}\n"

    def fingerprint(self) -> str:
        """MD5 fingerprint of the public key as colon-separated hex."""
        return ":".join(f"{b:02x}" for b in self._key.get_fingerprint())


class ParamikoKeyFactory(KeyFactory):
    """Generates RSA key pairs with paramiko."""

    def new_key_pair(self, bits: int) -> KeyPair:
        try:
            key = paramiko.RSAKey.generate(bits)
        except (ValueError, paramiko.SSHException) as e:
            logfire.error("Key pair generation failed", bits=bits, error=str(e))
            raise KeyGenerationFailed(f"failed to generate {bits}-bit RSA key: {e}") from e
        return RSAKeyPair(key)
