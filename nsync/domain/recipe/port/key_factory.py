"""Port for generating SSH key material."""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

from nsync.domain.shared.port import Port


@runtime_checkable
class KeyPair(Protocol):
    """An asymmetric key pair in the encodings the SSH daemon and proxy expect."""

    def pem_encoded_private_key(self) -> str: ...

    def authorized_key(self) -> str: ...

    def fingerprint(self) -> str: ...


@runtime_checkable
class KeyFactory(Port, Protocol):
    """Generate key pairs for the SSH side-channel."""

    @abstractmethod
    def new_key_pair(self, bits: int) -> KeyPair:
        """Generate a new key pair.

        Raises:
            KeyGenerationFailed: if the key cannot be generated.
        """
        ...
