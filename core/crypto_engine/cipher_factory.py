"""
CipherFactory — provider registry keyed on cryptography standard.

Usage:
    factory  = CipherFactory()
    provider = factory.create(CryptographyStandard.AES,
                              key_size=256, mode=CipherMode.CBC)
    key      = provider.generate_key(256)

    # List every standard / size / mode combination
    for name in factory.list_ciphers():
        print(factory.get_info(name))
"""

import logging

from .symmetric_base import SymmetricProvider
from .aes_crypto     import AESProvider
from .modes          import CipherMode, CryptographyStandard
from .exceptions     import UnsupportedMode, UnsupportedStandard

logger = logging.getLogger("SymCrypt.CipherFactory")


class CipherFactory:
    """
    Create the provider registered for a cryptography standard.

    A factory instance owns a copy of the default registry, so callers
    (and tests) can register or drop standards without touching others.
    An unknown standard raises UnsupportedStandard; a known standard
    asked for a mode it does not offer raises its subclass
    UnsupportedMode.
    """

    # ── Registry ─────────────────────────────────────────────────
    # Each entry: standard -> (ProviderClass, supported modes)
    _REGISTRY: dict[CryptographyStandard, dict] = {
        CryptographyStandard.AES: {
            "class": AESProvider,
            "modes": (CipherMode.CBC, CipherMode.ECB, CipherMode.CTR),
        },
    }

    def __init__(self, registry: dict | None = None):
        self._registry = dict(self._REGISTRY if registry is None
                              else registry)

    def register(self, standard: CryptographyStandard,
                 provider_class: type[SymmetricProvider],
                 supported_modes: tuple[CipherMode, ...]):
        self._registry[standard] = {
            "class": provider_class,
            "modes": tuple(supported_modes),
        }
        logger.debug("Registered provider %s for %s",
                     provider_class.__name__, standard.value)

    # ── Factory method ───────────────────────────────────────────

    def create(self, standard: CryptographyStandard,
               key: bytes | None = None,
               iv: bytes | None = None,
               mode: CipherMode = CipherMode.CBC,
               key_size: int | None = None) -> SymmetricProvider:
        """
        Create a provider instance.

        Parameters
        ----------
        standard : CryptographyStandard
            Registered standard, e.g. CryptographyStandard.AES.
        key, iv : bytes, optional
            Material to bind (decryption path). Leave empty to get a
            provider used for generation and per-call encryption.
        mode : CipherMode
            Block-cipher mode; must be supported by the standard.
        key_size : int, optional
            Expected key size in bits.
        """
        entry = self._entry(standard)
        if mode not in entry["modes"]:
            raise UnsupportedMode(
                f"{standard.value} does not support {mode.value} mode"
            )

        provider = entry["class"](key=key, iv=iv, mode=mode,
                                  key_size=key_size)
        logger.debug("Created provider: %s (bound=%s)",
                     provider.cipher_name, key is not None)
        return provider

    # ── Discovery ────────────────────────────────────────────────

    def is_available(self, standard: CryptographyStandard) -> bool:
        return standard in self._registry

    def list_standards(self) -> list[CryptographyStandard]:
        return list(self._registry)

    def list_ciphers(self) -> list[str]:
        """Return every 'STANDARD-SIZE-MODE' combination registered."""
        names = []
        for standard, entry in self._registry.items():
            for size in standard.key_sizes:
                for mode in entry["modes"]:
                    names.append(f"{standard.value}-{size}-{mode.value}")
        return names

    def get_info(self, cipher_name: str) -> dict:
        """Return metadata for a 'STANDARD-SIZE-MODE' name."""
        if cipher_name.upper() not in self.list_ciphers():
            raise UnsupportedStandard(f"Unknown cipher: {cipher_name}")
        standard_name, size, mode_name = cipher_name.upper().split("-")
        standard = CryptographyStandard.parse(standard_name)
        mode     = CipherMode.parse(mode_name)
        provider = self.create(standard, mode=mode, key_size=int(size))
        return {
            "name":      cipher_name.upper(),
            "key_bits":  int(size),
            "iv_bytes":  provider.iv_size if mode.uses_iv else 0,
            "padding":   "PKCS7" if mode.uses_padding else "none",
        }

    def get_all_info(self) -> list[dict]:
        return [self.get_info(name) for name in self.list_ciphers()]

    # ── helpers ──────────────────────────────────────────────────

    def _entry(self, standard: CryptographyStandard) -> dict:
        if standard not in self._registry:
            raise UnsupportedStandard(
                f"No provider implemented for {standard.value}. "
                f"Available: {[s.value for s in self._registry]}"
            )
        return self._registry[standard]
