"""
Error taxonomy for SymCrypt.

Every error derives from ``SymCryptError`` (itself a ``ValueError``, the
exception the cipher classes have always raised) so the CLI boundary can
report any of them with a single handler.
"""


class SymCryptError(ValueError):
    """Base class for every failure raised by the crypto core."""


class UnsupportedStandard(SymCryptError):
    """No provider is registered for the requested cryptography standard."""


class UnsupportedMode(UnsupportedStandard):
    """The standard is registered but does not offer the requested mode."""


class UnsupportedKeySize(SymCryptError):
    """Requested key size is not valid for the algorithm."""


class InvalidKeyMaterial(SymCryptError):
    """Decoded key (or IV) length does not match what the cipher needs."""


class InvalidCiphertext(SymCryptError):
    """Ciphertext is not block aligned or its padding is corrupt."""


class MalformedBase64(SymCryptError):
    """A caller-supplied value is not valid Base64."""


class MissingValueError(SymCryptError):
    """A required value is absent and interactive prompting is disabled."""
