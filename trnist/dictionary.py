"""Word definitions and a dictionary backed by a public web API."""

from __future__ import annotations

import json
import urllib.parse
import urllib.request
from abc import ABC, abstractmethod
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from trnist.signals import Signal

API_URL = "https://api.dictionaryapi.dev/api/v2/entries/{lang}/{word}"
DEFAULT_CACHE_SIZE = 20
FETCH_TIMEOUT = 30.0

Fetch = Callable[[str], bytes]


@dataclass
class Explanation:
    description: str = ""
    example: str = ""


@dataclass
class Meaning:
    part_of_speech: str = ""
    explanations: list[Explanation] = field(default_factory=list)


@dataclass
class Definition:
    word: str = ""
    phonetic: str = ""
    meanings: list[Meaning] = field(default_factory=list)


@dataclass
class DictionaryContext:
    lang: str = ""


class Dictionary(ABC):
    """A source of definitions reporting results through signals."""

    def __init__(self) -> None:
        self.definition_received = Signal()
        self.error_occurred = Signal()

    @abstractmethod
    def lookup(self, word: str, context: DictionaryContext) -> None:
        """Look ``word`` up and emit ``definition_received`` or ``error_occurred``."""


def build_url(word: str, context: DictionaryContext) -> str:
    """Return the API address for ``word`` in the context's language."""
    return API_URL.format(
        lang=urllib.parse.quote(context.lang, safe=""),
        word=urllib.parse.quote(word, safe=""),
    )


def fetch_url(url: str) -> bytes:
    """Download ``url``; network and HTTP failures raise OSError."""
    with urllib.request.urlopen(url, timeout=FETCH_TIMEOUT) as response:
        return response.read()


def _object(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _array(value: Any) -> list:
    return value if isinstance(value, list) else []


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


class ApiDictionary(Dictionary):
    """Dictionary that queries the web API and keeps recent results cached."""

    def __init__(self, fetch: Optional[Fetch] = None, cache_size: int = DEFAULT_CACHE_SIZE) -> None:
        super().__init__()
        self._fetch = fetch or fetch_url
        self._cache_size = cache_size
        self._cache: OrderedDict[str, Definition] = OrderedDict()

    def lookup(self, word: str, context: DictionaryContext) -> None:
        cached = self._cache.get(word)
        if cached is not None:
            self._cache.move_to_end(word)
            self.definition_received.emit(cached)
            return
        try:
            data = self._fetch(build_url(word, context))
        except OSError as error:
            self.error_occurred.emit(str(error))
            return
        self.parse_response(data)

    def parse_response(self, data: bytes | str) -> Optional[Definition]:
        """Build a Definition from an API response and emit the outcome."""
        try:
            document = json.loads(data)
        except (ValueError, TypeError):
            document = None
        if not isinstance(document, list):
            self.error_occurred.emit("Invalid response format")
            return None
        if not document:
            self.error_occurred.emit("Empty response")
            return None

        definition: Optional[Definition] = None
        for raw_entry in document:
            entry = _object(raw_entry)
            word = _text(entry.get("word"))
            if definition is None:
                definition = Definition(word=word)
                self._remember(word, definition)

            if "phonetic" not in entry or entry["phonetic"] is not None:
                definition.phonetic = _text(entry.get("phonetic"))
            elif isinstance(entry.get("phonetics"), list):
                phonetics = entry["phonetics"]
                first = _object(phonetics[0]) if phonetics else {}
                definition.phonetic = _text(first.get("text"))

            for raw_meaning in _array(entry.get("meanings")):
                meaning_object = _object(raw_meaning)
                definition.meanings.append(
                    Meaning(
                        part_of_speech=_text(meaning_object.get("partOfSpeech")),
                        explanations=[
                            Explanation(
                                description=_text(_object(item).get("definition")),
                                example=_text(_object(item).get("example")),
                            )
                            for item in _array(meaning_object.get("definitions"))
                        ],
                    )
                )

        self.definition_received.emit(definition)
        return definition

    def _remember(self, word: str, definition: Definition) -> None:
        if self._cache_size <= 0:
            return
        self._cache[word] = definition
        self._cache.move_to_end(word)
        while len(self._cache) > self._cache_size:
            self._cache.popitem(last=False)