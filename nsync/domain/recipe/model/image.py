"""Docker image reference parsing and canonicalization.

Follows the docker registry's legacy reference rules: a first path segment
names a registry only when it looks like a hostname (contains ``.`` or ``:``,
or is ``localhost``); otherwise the reference belongs to the official index,
where single-segment repositories live under the ``library/`` namespace.
"""

from urllib.parse import quote

from nsync.domain.shared.error import MalformedImageReference, UnexpectedScheme
from nsync.domain.shared.model.value import ValueObject

DOCKER_SCHEME = "docker"
DOCKER_INDEX_SERVER = "docker.io"
DEFAULT_NAMESPACE = "library"


class ImageReference(ValueObject):
    """A parsed image reference: ``[index/]remote_name[:tag]``."""

    index_name: str = ""  # empty = official index
    remote_name: str
    tag: str = ""

    @classmethod
    def parse(cls, reference: str) -> "ImageReference":
        if "://" in reference:
            raise UnexpectedScheme(reference)
        if not reference:
            raise MalformedImageReference(reference, "empty reference")

        first, sep, rest = reference.partition("/")

        if _is_official(first, has_remainder=bool(sep)):
            index_name = ""
            remote_name = reference
            if first == DOCKER_INDEX_SERVER:
                if not rest:
                    raise MalformedImageReference(reference, "registry without repository")
                index_name = DOCKER_INDEX_SERVER
                remote_name = rest
            if "/" not in remote_name:
                remote_name = f"{DEFAULT_NAMESPACE}/{remote_name}"
        else:
            if not rest:
                raise MalformedImageReference(reference, "registry without repository")
            index_name = first
            remote_name = rest

        remote_name, tag = _split_tag(remote_name)
        return cls(index_name=index_name, remote_name=remote_name, tag=tag)

    @property
    def path(self) -> str:
        """``index/remote_name``, or ``remote_name`` alone for the official index."""
        if self.index_name:
            return f"{self.index_name}/{self.remote_name}"
        return self.remote_name

    def to_uri(self) -> str:
        """Render as a root filesystem URI, e.g. ``docker:///library/ubuntu#14.04``.

        The path is always ``index_name + "/" + remote_name``, so an empty index
        produces the triple slash the executor expects for the default registry.
        """
        path = quote(f"{self.index_name}/{self.remote_name}", safe="/:@$&+,;=")
        uri = f"{DOCKER_SCHEME}://{path}"
        if self.tag:
            uri += "#" + quote(self.tag, safe="")
        return uri

    def __str__(self) -> str:
        return f"{self.path}:{self.tag}" if self.tag else self.path


def _is_official(first: str, has_remainder: bool) -> bool:
    return (
        not has_remainder
        or first == DOCKER_INDEX_SERVER
        or ("." not in first and ":" not in first and first != "localhost")
    )


def _split_tag(remote_name: str) -> tuple[str, str]:
    # A "/" after the last ":" means the colon belonged to a host:port.
    name, sep, tag = remote_name.rpartition(":")
    if not sep or "/" in tag:
        return remote_name, ""
    return name, tag


def convert_docker_uri(reference: str) -> str:
    """Canonicalize a user-supplied image reference into a root filesystem URI."""
    return ImageReference.parse(reference).to_uri()
