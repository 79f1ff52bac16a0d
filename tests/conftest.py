"""
Shared fixtures: a recording observer and a scripted operator prompt.
"""

import pytest

from core.crypto_engine import CipherFactory
from core.observer import RecordingObserver
from core.prompt import Prompt
from core.symmetric_services import SymmetricCryptographyService


class ScriptedPrompt(Prompt):
    """Answer prompts from a queue and remember what was asked."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.asked: list[str] = []

    def ask(self, prompt_text: str, secret: bool = False) -> str:
        self.asked.append(prompt_text)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {prompt_text}")
        return self.answers.pop(0)


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def prompt() -> ScriptedPrompt:
    return ScriptedPrompt()


@pytest.fixture
def service(observer, prompt) -> SymmetricCryptographyService:
    return SymmetricCryptographyService(
        factory=CipherFactory(), prompt=prompt, observer=observer,
    )
