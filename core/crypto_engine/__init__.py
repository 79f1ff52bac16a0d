"""
SymCrypt Crypto Engine — symmetric block-cipher providers.
"""

from .modes          import CryptographyStandard, CipherMode
from .exceptions     import (
    SymCryptError, UnsupportedStandard, UnsupportedMode, UnsupportedKeySize,
    InvalidKeyMaterial, InvalidCiphertext, MalformedBase64,
    MissingValueError,
)
from .symmetric_base import SymmetricProvider
from .aes_crypto     import AESProvider
from .cipher_factory import CipherFactory

__all__ = [
    # Standards & modes
    "CryptographyStandard", "CipherMode",
    # Providers
    "SymmetricProvider", "AESProvider", "CipherFactory",
    # Errors
    "SymCryptError", "UnsupportedStandard", "UnsupportedMode",
    "UnsupportedKeySize",
    "InvalidKeyMaterial", "InvalidCiphertext", "MalformedBase64",
    "MissingValueError",
]
