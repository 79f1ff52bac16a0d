"""
AES symmetric encryption: CBC, ECB and CTR with 128 / 192 / 256 bit keys.

Padded block modes (CBC, ECB) use PKCS7; CTR needs no padding.
ECB never uses an initialization vector: any IV handed to it is dropped.
No mode here carries an integrity tag, so a wrong IV or key produces
wrong plaintext rather than an error unless the padding breaks.
"""

import logging
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives import padding as sym_padding

from .symmetric_base import SymmetricProvider
from .modes          import CipherMode
from .exceptions     import (
    InvalidCiphertext, InvalidKeyMaterial, UnsupportedKeySize,
)
from utils.random_gen import SecureRandom

logger = logging.getLogger("SymCrypt.AES")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  AES provider
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class AESProvider(SymmetricProvider):
    """
    AES engine backed by ``cryptography``.

    Parameters
    ----------
    key : bytes, optional
        Bind the provider to a known key (decryption path).
    iv : bytes, optional
        Bind an initialization vector; ignored when *mode* is ECB.
    mode : CipherMode
        Default mode for encrypt() / decrypt().
    key_size : int, optional
        Expected key size in bits. Derived from *key* when bound.
    """
    BLOCK_BITS = 128
    KEY_SIZES  = (128, 192, 256)

    def __init__(self, key: bytes | None = None, iv: bytes | None = None,
                 mode: CipherMode = CipherMode.CBC,
                 key_size: int | None = None):
        if key_size is not None and key_size not in self.KEY_SIZES:
            raise UnsupportedKeySize(
                f"AES key size must be one of {self.KEY_SIZES} bits, "
                f"got {key_size}"
            )
        self._mode     = mode
        self._key_size = key_size
        self._key      = None
        self._iv       = None

        if key is not None:
            self._check_key(key)
            self._key      = key
            self._key_size = len(key) * 8

        if iv is not None:
            if mode.uses_iv:
                self._check_iv(iv)
                self._iv = iv
            else:
                logger.debug("IV ignored for %s mode", mode.value)

    # ── generation ───────────────────────────────────────────────
    def generate_key(self, size_bits: int) -> bytes:
        if size_bits not in self.KEY_SIZES:
            raise UnsupportedKeySize(
                f"AES key size must be one of {self.KEY_SIZES} bits, "
                f"got {size_bits}"
            )
        return SecureRandom.generate_key(size_bits)

    def generate_iv(self) -> bytes:
        return SecureRandom.generate_iv(self.block_size)

    # ── cipher operations ────────────────────────────────────────
    def encrypt(self, plaintext: bytes, key: bytes | None = None,
                iv: bytes | None = None,
                mode: CipherMode | None = None) -> bytes:
        mode   = mode or self._mode
        cipher = self._cipher(key, iv, mode)
        if mode.uses_padding:
            padder    = sym_padding.PKCS7(self.BLOCK_BITS).padder()
            plaintext = padder.update(plaintext) + padder.finalize()
        enc = cipher.encryptor()
        ct  = enc.update(plaintext) + enc.finalize()
        logger.debug("Encrypted %d bytes with %s", len(plaintext),
                     self._name_for(mode))
        return ct

    def decrypt(self, ciphertext: bytes, key: bytes | None = None,
                iv: bytes | None = None,
                mode: CipherMode | None = None) -> bytes:
        mode   = mode or self._mode
        cipher = self._cipher(key, iv, mode)

        if mode.uses_padding and (
                not ciphertext or len(ciphertext) % self.block_size):
            raise InvalidCiphertext(
                f"Ciphertext length must be a non-zero multiple of "
                f"{self.block_size} bytes, got {len(ciphertext)}"
            )

        dec    = cipher.decryptor()
        padded = dec.update(ciphertext) + dec.finalize()
        if not mode.uses_padding:
            return padded

        unpadder = sym_padding.PKCS7(self.BLOCK_BITS).unpadder()
        try:
            return unpadder.update(padded) + unpadder.finalize()
        except ValueError as exc:
            raise InvalidCiphertext(
                "Decryption failed: invalid padding (wrong key, IV "
                "or corrupted ciphertext)"
            ) from exc

    # ── metadata ─────────────────────────────────────────────────
    @property
    def cipher_name(self) -> str:
        return self._name_for(self._mode)

    @property
    def block_size(self) -> int:
        return self.BLOCK_BITS // 8

    @property
    def supported_key_sizes(self) -> tuple[int, ...]:
        return self.KEY_SIZES

    # ── helpers ──────────────────────────────────────────────────
    def _name_for(self, mode: CipherMode) -> str:
        size = self._key_size if self._key_size else "*"
        return f"AES-{size}-{mode.value}"

    def _check_key(self, key: bytes):
        if self._key_size is not None:
            expected = (self._key_size // 8,)
        else:
            expected = tuple(bits // 8 for bits in self.KEY_SIZES)
        if len(key) not in expected:
            raise InvalidKeyMaterial(
                f"AES key must be {' or '.join(map(str, expected))} "
                f"bytes, got {len(key)}"
            )

    def _check_iv(self, iv: bytes):
        if len(iv) != self.iv_size:
            raise InvalidKeyMaterial(
                f"AES initialization vector must be {self.iv_size} "
                f"bytes, got {len(iv)}"
            )

    def _cipher(self, key: bytes | None, iv: bytes | None,
                mode: CipherMode) -> Cipher:
        key = key if key is not None else self._key
        if key is None:
            raise InvalidKeyMaterial("No AES key supplied")
        self._check_key(key)

        if mode is CipherMode.ECB:
            return Cipher(algorithms.AES(key), modes.ECB())

        iv = iv if iv is not None else self._iv
        if iv is None:
            raise InvalidKeyMaterial(
                f"{mode.value} mode requires an initialization vector"
            )
        self._check_iv(iv)
        mode_cls = {
            CipherMode.CBC: modes.CBC,
            CipherMode.CTR: modes.CTR,
        }[mode]
        return Cipher(algorithms.AES(key), mode_cls(iv))
