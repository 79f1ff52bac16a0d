"""
Request / result models exchanged between the CLI and the orchestrator.

Both are immutable: a decryption request that is missing values is not
filled in place, the orchestrator derives a new, resolved request from it.
"""

from dataclasses import dataclass, field, replace
from enum import Enum

from core.crypto_engine import (
    CipherMode, CryptographyStandard, UnsupportedKeySize,
)
from core.encoding import b64encode_str


def is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


@dataclass(frozen=True)
class CipherType:
    """Standard, key size (bits) and mode selected for one operation."""

    standard: CryptographyStandard = CryptographyStandard.AES
    key_size: int = 256
    mode: CipherMode = CipherMode.CBC

    def __post_init__(self):
        if self.key_size not in self.standard.key_sizes:
            raise UnsupportedKeySize(
                f"{self.standard.value} key size must be one of "
                f"{self.standard.key_sizes} bits, got {self.key_size}"
            )

    def __str__(self) -> str:
        return f"{self.standard.value}-{self.key_size}-{self.mode.value}"

    @classmethod
    def parse(cls, name: str) -> "CipherType":
        """Parse 'AES-256-CBC' (case-insensitive)."""
        parts = name.strip().split("-")
        if len(parts) != 3:
            raise ValueError(
                f"Cipher must look like STANDARD-SIZE-MODE, got {name!r}"
            )
        standard, size, mode = parts
        try:
            key_size = int(size)
        except ValueError:
            raise ValueError(f"Key size must be a number, got {size!r}") from None
        return cls(
            standard=CryptographyStandard.parse(standard),
            key_size=key_size,
            mode=CipherMode.parse(mode),
        )


@dataclass(frozen=True)
class SymmetricRequest:
    """
    One encryption or decryption request.

    ``key`` and ``initialization_vector`` are Base64 text; ``content`` is
    plaintext when encrypting and Base64 ciphertext when decrypting.
    Empty strings count as absent.
    """

    cipher_type: CipherType
    is_encryption: bool
    key: str | None = field(default=None, repr=False)
    initialization_vector: str | None = None
    content: str | None = field(default=None, repr=False)

    @property
    def has_key(self) -> bool:
        return not is_blank(self.key)

    @property
    def has_iv(self) -> bool:
        return not is_blank(self.initialization_vector)

    @property
    def has_content(self) -> bool:
        return not is_blank(self.content)

    def with_values(self, **changes) -> "SymmetricRequest":
        return replace(self, **changes)


class ResultEncoding(Enum):
    BASE64 = "Base64String"
    RAW    = "Raw"


@dataclass(frozen=True)
class SymmetricResult:
    """
    Outcome of one request.

    Encryption fills every field (``initialization_vector`` is empty for
    ECB) and Base64-encodes them; decryption carries only the recovered
    plaintext in ``phrase``.
    """

    phrase: str = field(repr=False)
    key: str = field(default="", repr=False)
    initialization_vector: str = ""
    encoding: ResultEncoding = ResultEncoding.RAW
    method: str = "decryption"

    _LABELS = (
        ("key",                   "Key"),
        ("initialization_vector", "Initialization vector"),
        ("phrase",                "Phrase"),
        ("encoding",              "Encoded"),
    )

    @classmethod
    def for_encryption(cls, key: bytes, iv: bytes | None,
                       ciphertext: bytes,
                       mode: CipherMode) -> "SymmetricResult":
        return cls(
            phrase=b64encode_str(ciphertext),
            key=b64encode_str(key),
            initialization_vector=(
                b64encode_str(iv) if mode.uses_iv and iv else ""
            ),
            encoding=ResultEncoding.BASE64,
            method="encryption",
        )

    @classmethod
    def for_decryption(cls, plaintext: str) -> "SymmetricResult":
        return cls(phrase=plaintext)

    @property
    def is_encryption(self) -> bool:
        return self.method == "encryption"

    def to_dict(self) -> dict:
        """Populated fields only, keyed by their display label."""
        if not self.is_encryption:
            return {"Phrase": self.phrase}
        out = {}
        for attr, label in self._LABELS:
            value = getattr(self, attr)
            if isinstance(value, ResultEncoding):
                value = value.value
            if value:
                out[label] = value
        return out

    def __str__(self) -> str:
        return "\n".join(f"{label}: {value}"
                         for label, value in self.to_dict().items())
