import base64
import os

import pytest

from core.crypto_engine import (
    CipherFactory, CipherMode, CryptographyStandard, InvalidCiphertext,
    InvalidKeyMaterial, MalformedBase64, MissingValueError,
    UnsupportedStandard,
)
from core.models import CipherType, ResultEncoding, SymmetricRequest
from core.prompt import NonInteractivePrompt
from core.symmetric_services import (
    SymmetricCryptographyService, resolve_decryption_request,
)

from conftest import ScriptedPrompt

AES_256_CBC = CipherType(CryptographyStandard.AES, 256, CipherMode.CBC)
AES_128_ECB = CipherType(CryptographyStandard.AES, 128, CipherMode.ECB)


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def encrypt(service, cipher_type, content, **kwargs):
    return service.process(
        SymmetricRequest(cipher_type, is_encryption=True, content=content,
                         **kwargs)
    )


def decrypt(service, cipher_type, **kwargs):
    return service.process(
        SymmetricRequest(cipher_type, is_encryption=False, **kwargs)
    )


# ── encryption ───────────────────────────────────────────────────

def test_cbc_generates_key_and_iv_and_round_trips(service, observer):
    result = encrypt(service, AES_256_CBC, "hello world")

    assert len(result.key) == 44
    assert len(result.initialization_vector) == 24
    assert result.phrase
    assert result.encoding is ResultEncoding.BASE64
    assert {"key.generated", "iv.generated", "encrypt.success"} <= set(observer.names)
    assert observer.advisories == []

    recovered = decrypt(service, AES_256_CBC, key=result.key,
                        initialization_vector=result.initialization_vector,
                        content=result.phrase)
    assert recovered.phrase == "hello world"
    assert recovered.key == "" and recovered.initialization_vector == ""


def test_ecb_with_caller_iv_drops_it(service, observer, prompt):
    result = encrypt(service, AES_128_ECB, "hello world",
                     initialization_vector=b64(os.urandom(16)))

    assert result.initialization_vector == ""
    assert len(base64.b64decode(result.key)) == 16
    assert observer.advisories == ["iv.ignored"]

    recovered = decrypt(service, AES_128_ECB, key=result.key,
                        content=result.phrase)
    assert recovered.phrase == "hello world"
    assert prompt.asked == []


def test_ecb_ciphertext_does_not_depend_on_iv(service):
    key = b64(os.urandom(16))
    plain = encrypt(service, AES_128_ECB, "same input", key=key)
    with_iv = encrypt(service, AES_128_ECB, "same input", key=key,
                      initialization_vector=b64(os.urandom(16)))
    assert plain.phrase == with_iv.phrase


def test_caller_key_and_iv_are_used_with_reuse_advisory(service, observer):
    key, iv = b64(os.urandom(32)), b64(os.urandom(16))
    result = encrypt(service, AES_256_CBC, "hello world", key=key,
                     initialization_vector=iv)

    assert result.key == key
    assert result.initialization_vector == iv
    assert "key.provided" in observer.names
    assert observer.advisories == ["iv.reuse"]

    again = encrypt(service, AES_256_CBC, "hello world", key=key,
                    initialization_vector=iv)
    assert again.phrase == result.phrase


def test_encryption_never_prompts():
    service = SymmetricCryptographyService(prompt=NonInteractivePrompt())
    result = encrypt(service, AES_256_CBC, None)
    assert len(base64.b64decode(result.phrase)) == 16
    assert decrypt(service, AES_256_CBC, key=result.key,
                   initialization_vector=result.initialization_vector,
                   content=result.phrase).phrase == ""


def test_encryption_with_wrong_size_key(service):
    with pytest.raises(InvalidKeyMaterial):
        encrypt(service, AES_256_CBC, "hello", key=b64(os.urandom(16)))


def test_encryption_with_malformed_key(service):
    with pytest.raises(MalformedBase64):
        encrypt(service, AES_256_CBC, "hello", key="not*base64")


def test_ctr_round_trip(service):
    ctr = CipherType(CryptographyStandard.AES, 192, CipherMode.CTR)
    result = encrypt(service, ctr, "stream mode text")
    assert len(base64.b64decode(result.phrase)) == len("stream mode text")
    assert decrypt(service, ctr, key=result.key,
                   initialization_vector=result.initialization_vector,
                   content=result.phrase).phrase == "stream mode text"


# ── decryption prompting ─────────────────────────────────────────

def test_missing_iv_is_prompted_for(observer):
    encrypted = encrypt(SymmetricCryptographyService(observer=observer),
                        AES_256_CBC, "hello world")
    prompt = ScriptedPrompt(encrypted.initialization_vector)
    service = SymmetricCryptographyService(prompt=prompt, observer=observer)

    result = decrypt(service, AES_256_CBC, key=encrypted.key,
                     content=encrypted.phrase)

    assert prompt.asked == ["Enter initialization vector"]
    assert "prompt.iv" in observer.names
    assert result.phrase == "hello world"


def test_wrong_iv_gives_wrong_plaintext_without_failing(service):
    text = "hello world, this message spans several AES blocks"
    encrypted = encrypt(service, AES_256_CBC, text)

    result = decrypt(service, AES_256_CBC, key=encrypted.key,
                     initialization_vector=b64(os.urandom(16)),
                     content=encrypted.phrase)

    assert result.phrase != text
    assert result.phrase.endswith(text[16:])


def test_all_missing_values_prompted_in_order(service, observer):
    encrypted = encrypt(service, AES_256_CBC, "hello world")
    prompt = ScriptedPrompt(encrypted.phrase, encrypted.key,
                            encrypted.initialization_vector)
    service = SymmetricCryptographyService(prompt=prompt, observer=observer)

    assert decrypt(service, AES_256_CBC).phrase == "hello world"
    assert prompt.asked == ["Enter encrypted phrase", "Enter encryption key",
                            "Enter initialization vector"]


def test_ecb_decryption_never_asks_for_iv(service, prompt, observer):
    encrypted = encrypt(service, AES_128_ECB, "hello world")
    prompt.answers.append(encrypted.key)

    result = decrypt(service, AES_128_ECB, content=encrypted.phrase)

    assert prompt.asked == ["Enter encryption key"]
    assert "prompt.iv" not in observer.names
    assert result.phrase == "hello world"


def test_ecb_decryption_with_iv_is_advisory(service, observer):
    encrypted = encrypt(service, AES_128_ECB, "hello world")
    result = decrypt(service, AES_128_ECB, key=encrypted.key,
                     initialization_vector="garbage that is never decoded",
                     content=encrypted.phrase)
    assert result.phrase == "hello world"
    assert observer.advisories == ["iv.ignored"]


def test_non_interactive_prompt_fails_fast():
    service = SymmetricCryptographyService(prompt=NonInteractivePrompt())
    with pytest.raises(MissingValueError):
        decrypt(service, AES_256_CBC, key=b64(os.urandom(32)),
                content=b64(os.urandom(16)))


def test_resolve_leaves_raw_request_untouched(observer):
    raw = SymmetricRequest(AES_256_CBC, is_encryption=False,
                           key="a2V5", content="Y3Q=")
    prompt = ScriptedPrompt("aXY=")

    resolved = resolve_decryption_request(raw, prompt, observer)

    assert resolved.initialization_vector == "aXY="
    assert raw.initialization_vector is None
    assert resolved is not raw


def test_resolve_returns_same_request_when_complete(observer):
    raw = SymmetricRequest(AES_256_CBC, False, key="a2V5",
                           initialization_vector="aXY=", content="Y3Q=")
    assert resolve_decryption_request(raw, ScriptedPrompt(), observer) is raw
    assert observer.events == []


# ── decryption failures ──────────────────────────────────────────

def test_decrypt_with_wrong_size_key(service, observer):
    with pytest.raises(InvalidKeyMaterial):
        decrypt(service, AES_256_CBC, key=b64(os.urandom(16)),
                initialization_vector=b64(os.urandom(16)),
                content=b64(os.urandom(32)))
    assert "decrypt.failure" in observer.names
    assert "decrypt.success" not in observer.names


@pytest.mark.parametrize("iv_length", [8, 15, 17, 32])
def test_decrypt_with_wrong_size_iv(service, observer, iv_length):
    with pytest.raises(InvalidKeyMaterial, match="initialization vector"):
        decrypt(service, AES_256_CBC, key=b64(os.urandom(32)),
                initialization_vector=b64(os.urandom(iv_length)),
                content=b64(os.urandom(32)))
    assert "decrypt.failure" in observer.names
    assert "decrypt.success" not in observer.names


def test_decrypt_unaligned_ciphertext(service):
    with pytest.raises(InvalidCiphertext):
        decrypt(service, AES_256_CBC, key=b64(os.urandom(32)),
                initialization_vector=b64(os.urandom(16)),
                content=b64(os.urandom(15)))


@pytest.mark.parametrize("field", ["key", "initialization_vector", "content"])
def test_decrypt_malformed_base64(service, field):
    values = {
        "key": b64(os.urandom(32)),
        "initialization_vector": b64(os.urandom(16)),
        "content": b64(os.urandom(16)),
    }
    values[field] = "%%% not base64 %%%"
    with pytest.raises(MalformedBase64):
        decrypt(service, AES_256_CBC, **values)


def test_unsupported_standard_fails_before_prompting(observer, prompt):
    service = SymmetricCryptographyService(factory=CipherFactory(registry={}),
                                           prompt=prompt, observer=observer)
    with pytest.raises(UnsupportedStandard):
        decrypt(service, AES_256_CBC)
    with pytest.raises(UnsupportedStandard):
        encrypt(service, AES_256_CBC, "hello")
    assert prompt.asked == []


def test_surrogate_escaped_text_keeps_its_original_bytes(service):
    encrypted = encrypt(service, AES_256_CBC, "caf\udce9")
    result = decrypt(service, AES_256_CBC, key=encrypted.key,
                     initialization_vector=encrypted.initialization_vector,
                     content=encrypted.phrase)
    # b"caf\xe9" is not UTF-8, so the lone byte decodes as a replacement
    assert result.phrase == "caf\ufffd"
