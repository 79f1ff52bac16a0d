"""
Abstract base class for every symmetric cipher provider in SymCrypt.

A provider is registered in the CipherFactory under one
CryptographyStandard; the orchestrator only talks to this interface, so
supporting a new standard means implementing one subclass and
registering it.

Two ways to use a provider:
    generation / encryption  → Provider(key_size=256, mode=CipherMode.CBC)
                               then pass key and iv per call
    bound decryption         → Provider(key=..., iv=..., mode=...)
                               then call decrypt(ciphertext)
"""

from abc import ABC, abstractmethod

from .modes import CipherMode


class SymmetricProvider(ABC):
    """
    Unified interface for key/IV generation and block-cipher operations.

    encrypt() / decrypt() work on raw bytes; Base64 handling belongs to
    the orchestrator.
    """

    @abstractmethod
    def generate_key(self, size_bits: int) -> bytes:
        """Return *size_bits* / 8 secure random bytes."""

    @abstractmethod
    def generate_iv(self) -> bytes:
        """Return one block of secure random bytes."""

    @abstractmethod
    def encrypt(self, plaintext: bytes, key: bytes | None = None,
                iv: bytes | None = None,
                mode: CipherMode | None = None) -> bytes:
        """Encrypt plaintext → ciphertext (padded when the mode needs it)."""

    @abstractmethod
    def decrypt(self, ciphertext: bytes, key: bytes | None = None,
                iv: bytes | None = None,
                mode: CipherMode | None = None) -> bytes:
        """Decrypt ciphertext produced by encrypt() → plaintext."""

    @property
    @abstractmethod
    def cipher_name(self) -> str:
        """Human-readable name, e.g. 'AES-256-CBC'."""

    @property
    @abstractmethod
    def block_size(self) -> int:
        """Block size in bytes."""

    @property
    @abstractmethod
    def supported_key_sizes(self) -> tuple[int, ...]:
        """Valid key sizes in bits."""

    @property
    def iv_size(self) -> int:
        return self.block_size

    def info(self) -> dict:
        """Return provider metadata for the `ciphers` listing."""
        return {
            "name":        self.cipher_name,
            "key_bits":    list(self.supported_key_sizes),
            "block_bytes": self.block_size,
            "iv_bytes":    self.iv_size,
        }
