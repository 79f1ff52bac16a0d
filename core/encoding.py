"""
Base64 helpers used for all key / IV / ciphertext interchange.
"""

import base64
import binascii

from core.crypto_engine.exceptions import MalformedBase64


def b64encode_str(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def b64decode_str(value: str, field: str = "value") -> bytes:
    """
    Strictly decode *value*; surrounding whitespace is tolerated.

    Raises ``MalformedBase64`` naming *field* when the text contains
    characters outside the alphabet or has broken padding.
    """
    text = value.strip()
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedBase64(
            f"The {field} is not valid Base64: {exc}"
        ) from exc
