"""
Operator prompts used to fill in missing decryption inputs.
"""

import getpass
from abc import ABC, abstractmethod

from core.crypto_engine import MissingValueError


class Prompt(ABC):

    @abstractmethod
    def ask(self, prompt_text: str, secret: bool = False) -> str:
        """Return raw operator text for *prompt_text*; no validation."""


class ConsolePrompt(Prompt):
    """
    Blocking console read. There is no timeout: an operator who never
    answers keeps the process waiting.
    """

    def __init__(self, hide_secrets: bool = False):
        self.hide_secrets = hide_secrets

    def ask(self, prompt_text: str, secret: bool = False) -> str:
        if secret and self.hide_secrets:
            return getpass.getpass(f"{prompt_text}: ")
        return input(f"{prompt_text}: ")


class NonInteractivePrompt(Prompt):
    """Fail with MissingValueError instead of blocking."""

    def ask(self, prompt_text: str, secret: bool = False) -> str:
        raise MissingValueError(
            f"Missing input and prompting is disabled ({prompt_text})"
        )
