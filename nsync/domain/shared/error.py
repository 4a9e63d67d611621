"""Error hierarchy for nsync.

DomainError covers problems with the inbound request or its data.
InfrastructureError covers failures of collaborators (key generation, routing).
Every error carries a stable ``code`` so callers can reject the originating
request without parsing messages.
"""


class NsyncError(Exception):
    """Base class for all nsync errors."""

    default_code: str = "nsync_error"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code


class DomainError(NsyncError):
    """The request cannot be turned into a recipe."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """A request field holds an invalid value."""

    default_code = "validation_error"

    def __init__(self, message: str, code: str | None = None, field: str | None = None):
        super().__init__(message, code=code)
        self.field = field


class InfrastructureError(NsyncError):
    """A collaborator failed while building a recipe."""

    default_code = "infrastructure_error"


# =============================================================================
# Request validation
# =============================================================================


class MissingImageSource(ValidationError):
    default_code = "missing_image_source"

    def __init__(self, message: str = "missing docker image"):
        super().__init__(message, field="docker_image_url")


class ConflictingSources(ValidationError):
    default_code = "conflicting_sources"

    def __init__(
        self, message: str = "desired app contains both droplet url and docker image url"
    ):
        super().__init__(message, field="droplet_uri")


class UnknownLifecycle(DomainError):
    default_code = "unknown_lifecycle"

    def __init__(self, lifecycle: str):
        super().__init__(f"no lifecycle binary bundle defined for '{lifecycle}'")
        self.lifecycle = lifecycle


# =============================================================================
# Image reference
# =============================================================================


class UnexpectedScheme(ValidationError):
    default_code = "unexpected_scheme"

    def __init__(self, reference: str):
        super().__init__(
            f"docker URI [{reference}] should not contain scheme", field="docker_image_url"
        )
        self.reference = reference


class MalformedImageReference(ValidationError):
    default_code = "malformed_image_reference"

    def __init__(self, reference: str, reason: str):
        super().__init__(
            f"docker URI [{reference}] is malformed: {reason}", field="docker_image_url"
        )
        self.reference = reference


# =============================================================================
# Execution metadata
# =============================================================================


class MalformedMetadata(ValidationError):
    default_code = "malformed_metadata"

    def __init__(self, reason: str):
        super().__init__(
            f"execution metadata could not be decoded: {reason}", field="execution_metadata"
        )


class NoSupportedPortsFound(ValidationError):
    default_code = "no_supported_ports"

    def __init__(self, protocols: list[str]):
        super().__init__(
            f"No tcp ports found in image metadata (declared protocols: {', '.join(protocols)})",
            field="execution_metadata",
        )
        self.protocols = protocols


# =============================================================================
# Collaborators
# =============================================================================


class KeyGenerationFailed(InfrastructureError):
    default_code = "key_generation_failed"


class RouteTranslationFailed(InfrastructureError):
    default_code = "route_translation_failed"
