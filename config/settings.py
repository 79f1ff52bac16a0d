import os


class Settings:
    """Centralised application configuration."""

    # ── application ──────────────────────────────────────────────
    APP_NAME    = "SymCrypt"
    APP_VERSION = "1.0.0"

    # ── paths ────────────────────────────────────────────────────
    # relative to the working directory, never the install location
    LOG_DIR  = "Log"
    LOG_FILE = os.getenv("SYMCRYPT_LOG_FILE",
                         os.path.join(LOG_DIR, "symcrypt.log"))

    # ── crypto defaults ──────────────────────────────────────────
    DEFAULT_STANDARD = "AES"
    DEFAULT_KEY_SIZE = 256       # bits
    DEFAULT_MODE     = "CBC"

    # ── logging ──────────────────────────────────────────────────
    LOG_LEVEL        = os.getenv("SYMCRYPT_LOG_LEVEL", "INFO")
    LOG_MAX_BYTES    = 1024 * 1024
    LOG_BACKUP_COUNT = 12
    LOG_FORMAT       = "[%(asctime)s] [%(levelname)-8s] %(name)-24s — %(message)s"

    @classmethod
    def default_cipher(cls) -> str:
        return f"{cls.DEFAULT_STANDARD}-{cls.DEFAULT_KEY_SIZE}-{cls.DEFAULT_MODE}"
