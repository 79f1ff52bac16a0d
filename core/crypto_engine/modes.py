"""
Cryptography standards and block-cipher modes understood by SymCrypt.
"""

from enum import Enum


class CryptographyStandard(Enum):
    AES = "AES"

    @property
    def key_sizes(self) -> tuple[int, ...]:
        """Key sizes (bits) the standard defines."""
        return _KEY_SIZES[self]

    @classmethod
    def parse(cls, name: str) -> "CryptographyStandard":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown cryptography standard: {name}") from None


_KEY_SIZES = {
    CryptographyStandard.AES: (128, 192, 256),
}


class CipherMode(Enum):
    CBC = "CBC"
    ECB = "ECB"
    CTR = "CTR"

    @property
    def uses_iv(self) -> bool:
        return self is not CipherMode.ECB

    @property
    def uses_padding(self) -> bool:
        """Block modes pad to the block size; CTR is a stream mode."""
        return self in (CipherMode.CBC, CipherMode.ECB)

    @classmethod
    def parse(cls, name: str) -> "CipherMode":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown cipher mode: {name}") from None
