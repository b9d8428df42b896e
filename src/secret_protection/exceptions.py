"""Custom exceptions for the secret protection layer."""


class SecretProtectionError(Exception):
    """Base exception for secret protection errors."""

    pass


class ConfigurationError(SecretProtectionError):
    """
    Raised when the secret for a key domain is missing or empty.

    This is a FATAL error. It signals a broken deployment and must reach
    the caller; it is never retried or replaced by a default key.
    """

    pass


class EncryptionError(SecretProtectionError):
    """Raised when sealing a payload fails."""

    pass


class DecodeFailure(SecretProtectionError):
    """
    Base exception for every decode-time failure.

    Callers must not branch on the subclass: a malformed token and a
    forged one are reported the same way.
    """

    def __init__(self, message: str = "Token could not be decoded") -> None:
        super().__init__(message)


class ValidationError(DecodeFailure):
    """
    Raised when external input has the wrong shape.

    Examples:
    - Token with the wrong number of segments or an unknown version
    - Segment that is not base64url
    - CBU that is not 22 digits or fails its checksum
    """

    pass


class AuthenticationFailure(DecodeFailure):
    """Raised when the AEAD tag does not verify (tampered data or wrong key)."""

    pass
