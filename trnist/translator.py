"""Translation requests and the interface translators implement."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from trnist.signals import Signal


@dataclass
class TranslatorContext:
    api: str = ""
    from_lang: str = "auto"
    to_lang: str = "en"


class Translator(ABC):
    """A translation service reporting results through signals."""

    def __init__(self) -> None:
        self.translate_received = Signal()
        self.error_occurred = Signal()

    @abstractmethod
    def translate(self, text: str, context: TranslatorContext) -> None:
        """Translate ``text`` and emit ``translate_received`` or ``error_occurred``."""