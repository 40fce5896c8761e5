"""View models for the dictionary and translation panels."""

from __future__ import annotations

from trnist.dictionary import Definition, Dictionary, DictionaryContext
from trnist.translator import Translator, TranslatorContext

MAX_RETRY_COUNT = 10
DEFAULT_WORD = "crop"
DICTIONARY_LANG = "en"
SAMPLE_TEXT = "It cannot be called our mother, but our grave."
SAMPLE_CONTEXT = TranslatorContext(api="yandex", from_lang="en", to_lang="ru")


def render_definition(definition: Definition) -> str:
    """Render a definition as the HTML shown in the dictionary panel."""
    text = (
        f"<header><strong>{definition.word}</strong>"
        f"<span>\t{definition.phonetic}</span></header><br>"
    )
    if definition.meanings:
        sections = []
        for meaning in definition.meanings:
            items = "".join(
                f"<li><p>{explanation.description}</p>"
                f"<q><i>{explanation.example}</i></q></li>"
                for explanation in meaning.explanations
            )
            sections.append(
                f"<section><span>{meaning.part_of_speech}</span><ol>{items}</ol></section>"
            )
        text += "<div>" + "".join(sections) + "</div>"
    return text


class DictionaryPanel:
    """Shows the definition of the selected word, retrying failed lookups."""

    title = "Dictionary"

    def __init__(self, dictionary: Dictionary) -> None:
        self.dictionary = dictionary
        self.word = ""
        self.retry_count = 0
        self.text = ""
        self.is_html = False
        dictionary.definition_received.connect(self.on_definition_received)
        dictionary.error_occurred.connect(self.on_definition_error)

    def update(self) -> None:
        self.on_word_selected(DEFAULT_WORD)

    def on_definition_received(self, definition: Definition) -> None:
        self.text = render_definition(definition)
        self.is_html = True

    def on_definition_error(self, error: str) -> None:
        if self.retry_count <= MAX_RETRY_COUNT:
            self.retry_count += 1
            self.dictionary.lookup(self.word, DictionaryContext(DICTIONARY_LANG))
        else:
            self.text = error
            self.is_html = False

    def on_word_selected(self, word: str) -> None:
        self.retry_count = 0
        self.word = word
        self.dictionary.lookup(word, DictionaryContext(DICTIONARY_LANG))


class TranslationPanel:
    """Shows the latest translation received from a translator."""

    title = "Translation"

    def __init__(self, translator: Translator) -> None:
        self.translator = translator
        self.text = ""
        translator.translate_received.connect(self.on_translation_changed)

    def update(self) -> None:
        self.translator.translate(SAMPLE_TEXT, SAMPLE_CONTEXT)

    def on_translation_changed(self, translation: str) -> None:
        self.text = translation