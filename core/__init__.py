from .models             import CipherType, SymmetricRequest, SymmetricResult, ResultEncoding
from .symmetric_services import SymmetricCryptographyService, resolve_decryption_request

__all__ = ["CipherType", "SymmetricRequest", "SymmetricResult", "ResultEncoding",
           "SymmetricCryptographyService", "resolve_decryption_request"]
