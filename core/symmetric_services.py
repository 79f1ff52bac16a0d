"""
Orchestration layer for symmetric encryption and decryption.

Takes one SymmetricRequest, decides which key / IV material to reuse or
generate, runs the provider registered for the request's standard and
returns a SymmetricResult. Every decision is reported to the injected
observer; missing decryption inputs are asked of the injected prompt.
"""

from core.crypto_engine import (
    CipherFactory, SymCryptError, UnsupportedStandard,
)
from core.encoding import b64decode_str
from core.models   import SymmetricRequest, SymmetricResult
from core.observer import CryptoObserver, LoggingObserver
from core.prompt   import ConsolePrompt, Prompt


IV_IGNORED_ADVISORY = (
    "Initialization vector is not valid for ECB cipher mode and will be "
    "ignored."
)
IV_REUSE_ADVISORY = (
    "Using the same initialization vector for more than one encryption "
    "is not recommended!"
)


def resolve_decryption_request(request: SymmetricRequest, prompt: Prompt,
                               observer: CryptoObserver) -> SymmetricRequest:
    """
    Return a copy of *request* with every value decryption needs.

    Asks for the encrypted phrase, then the key, then the IV (only when
    the mode uses one). *request* itself is left untouched.
    """
    changes = {}

    if not request.has_content:
        observer.record("prompt.content",
                        "Data which should be decrypted is missing - "
                        "asking user for input.")
        changes["content"] = prompt.ask("Enter encrypted phrase")

    if not request.has_key:
        observer.record("prompt.key",
                        "The encryption key is missing - asking user "
                        "for input.")
        changes["key"] = prompt.ask("Enter encryption key", secret=True)

    if request.cipher_type.mode.uses_iv and not request.has_iv:
        observer.record("prompt.iv",
                        "The initialization vector is missing - asking "
                        "user for input.")
        changes["initialization_vector"] = prompt.ask(
            "Enter initialization vector"
        )

    return request.with_values(**changes) if changes else request


class SymmetricCryptographyService:
    """
    Orchestrator for symmetric encryption and decryption.

    Parameters
    ----------
    factory : CipherFactory, optional
        Provider registry; dispatch on the request's standard goes
        through it.
    prompt : Prompt, optional
        Collaborator for missing decryption inputs. Use
        NonInteractivePrompt when embedding outside a console.
    observer : CryptoObserver, optional
        Receives decision-point events and advisories.
    """

    def __init__(self, factory: CipherFactory | None = None,
                 prompt: Prompt | None = None,
                 observer: CryptoObserver | None = None):
        self.factory  = factory or CipherFactory()
        self.prompt   = prompt or ConsolePrompt()
        self.observer = observer or LoggingObserver()

    # ── dispatch ─────────────────────────────────────────────────
    def process(self, request: SymmetricRequest) -> SymmetricResult:
        standard = request.cipher_type.standard
        self.observer.record(
            "request.parsed",
            f"Command for {standard.value} de/encryption successfully "
            f"parsed.",
        )
        if not self.factory.is_available(standard):
            raise UnsupportedStandard(
                f"No implementation available for {standard.value}"
            )

        if request.is_encryption:
            return self.encrypt(request)
        return self.decrypt(request)

    # ── encryption ───────────────────────────────────────────────
    def encrypt(self, request: SymmetricRequest) -> SymmetricResult:
        cipher_type = request.cipher_type
        mode        = cipher_type.mode
        self.observer.record("encrypt.request",
                             f"New encryption request => {cipher_type}")

        provider = self.factory.create(cipher_type.standard, mode=mode,
                                       key_size=cipher_type.key_size)

        if request.has_key:
            self.observer.record("key.provided",
                                 "Working with the provided encryption key.")
            key = b64decode_str(request.key, "encryption key")
        else:
            self.observer.record("key.generated",
                                 "Generating new encryption key.")
            key = provider.generate_key(cipher_type.key_size)

        iv = None
        if not mode.uses_iv:
            self._note_ignored_iv(request)
        elif request.has_iv:
            self.observer.record("iv.provided",
                                 "Working with the provided initialization "
                                 "vector.")
            self.observer.advise("iv.reuse", IV_REUSE_ADVISORY)
            iv = b64decode_str(request.initialization_vector,
                               "initialization vector")
        else:
            self.observer.record("iv.generated",
                                 "Generating new initialization vector.")
            iv = provider.generate_iv()

        # argv text that was not valid UTF-8 arrives as lone surrogates;
        # surrogateescape restores the original bytes
        plaintext = (request.content or "").encode("utf-8", "surrogateescape")
        try:
            ciphertext = provider.encrypt(plaintext, key, iv, mode)
        except SymCryptError as exc:
            self.observer.record("encrypt.failure", f"Encryption failed: {exc}")
            raise

        self.observer.record("encrypt.success", "Successfully encrypted.")
        return SymmetricResult.for_encryption(key, iv, ciphertext, mode)

    # ── decryption ───────────────────────────────────────────────
    def decrypt(self, request: SymmetricRequest) -> SymmetricResult:
        cipher_type = request.cipher_type
        mode        = cipher_type.mode
        self.observer.record("decrypt.request",
                             f"New decryption request => {cipher_type}")
        self._note_ignored_iv(request)

        resolved = resolve_decryption_request(request, self.prompt,
                                              self.observer)
        try:
            ciphertext = b64decode_str(resolved.content, "encrypted phrase")
            key        = b64decode_str(resolved.key, "encryption key")
            iv         = None
            if mode.uses_iv:
                iv = b64decode_str(resolved.initialization_vector,
                                   "initialization vector")

            provider  = self.factory.create(cipher_type.standard, key=key,
                                            iv=iv, mode=mode,
                                            key_size=cipher_type.key_size)
            plaintext = provider.decrypt(ciphertext)
        except SymCryptError as exc:
            self.observer.record("decrypt.failure", f"Decryption failed: {exc}")
            raise

        self.observer.record("decrypt.success", "Successfully decrypted.")
        return SymmetricResult.for_decryption(
            plaintext.decode("utf-8", errors="replace")
        )

    # ── helpers ──────────────────────────────────────────────────
    def _note_ignored_iv(self, request: SymmetricRequest):
        if request.has_iv and not request.cipher_type.mode.uses_iv:
            self.observer.advise("iv.ignored", IV_IGNORED_ADVISORY)
