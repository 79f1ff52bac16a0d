"""
Cryptographically-secure random value generators.
"""

import secrets


class SecureRandom:

    @staticmethod
    def generate_key(size_bits: int) -> bytes:
        return secrets.token_bytes(size_bits // 8)

    @staticmethod
    def generate_iv(length: int = 16) -> bytes:
        return secrets.token_bytes(length)
