import json

import pytest

from trnist.dictionary import (
    ApiDictionary,
    Definition,
    Dictionary,
    DictionaryContext,
    Explanation,
    Meaning,
    build_url,
)

SAMPLE = [
    {
        "word": "crop",
        "phonetic": "/kɹɒp/",
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [
                    {"definition": "A harvest.", "example": "a good crop"},
                    {"definition": "A riding whip."},
                ],
            }
        ],
    }
]


class FakeFetch:
    def __init__(self, *responses):
        self.responses = list(responses)
        self.urls = []

    def __call__(self, url):
        self.urls.append(url)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def collect(dictionary):
    definitions, errors = [], []
    dictionary.definition_received.connect(definitions.append)
    dictionary.error_occurred.connect(errors.append)
    return definitions, errors


def test_build_url_format():
    assert build_url("crop", DictionaryContext("en")) == (
        "https://api.dictionaryapi.dev/api/v2/entries/en/crop"
    )


def test_lookup_parses_sample():
    fetch = FakeFetch(json.dumps(SAMPLE).encode())
    dictionary = ApiDictionary(fetch=fetch)
    definitions, errors = collect(dictionary)
    dictionary.lookup("crop", DictionaryContext("en"))
    assert errors == []
    assert fetch.urls == [build_url("crop", DictionaryContext("en"))]
    assert definitions == [
        Definition(
            word="crop",
            phonetic="/kɹɒp/",
            meanings=[
                Meaning(
                    part_of_speech="noun",
                    explanations=[
                        Explanation("A harvest.", "a good crop"),
                        Explanation("A riding whip.", ""),
                    ],
                )
            ],
        )
    ]


def test_null_phonetic_falls_back_to_phonetics():
    data = [{"word": "w", "phonetic": None, "phonetics": [{"text": "/w/"}]}]
    dictionary = ApiDictionary(fetch=FakeFetch())
    definition = dictionary.parse_response(json.dumps(data))
    assert definition.phonetic == "/w/"


def test_missing_phonetic_gives_empty_string():
    data = [{"word": "w", "phonetics": [{"text": "/w/"}]}]
    definition = ApiDictionary(fetch=FakeFetch()).parse_response(json.dumps(data))
    assert definition.phonetic == ""


def test_multiple_entries_merge_meanings():
    data = [
        {"word": "a", "meanings": [{"partOfSpeech": "noun", "definitions": []}]},
        {"word": "b", "meanings": [{"partOfSpeech": "verb", "definitions": []}]},
    ]
    definition = ApiDictionary(fetch=FakeFetch()).parse_response(json.dumps(data))
    assert definition.word == "a"
    assert [m.part_of_speech for m in definition.meanings] == ["noun", "verb"]


@pytest.mark.parametrize("payload", [b"not json", b'{"title": "No Definitions Found"}'])
def test_invalid_response_format(payload):
    dictionary = ApiDictionary(fetch=FakeFetch())
    definitions, errors = collect(dictionary)
    assert dictionary.parse_response(payload) is None
    assert errors == ["Invalid response format"]
    assert definitions == []


def test_empty_response():
    dictionary = ApiDictionary(fetch=FakeFetch())
    _, errors = collect(dictionary)
    dictionary.parse_response(b"[]")
    assert errors == ["Empty response"]


def test_network_error_is_reported():
    dictionary = ApiDictionary(fetch=FakeFetch(OSError("connection refused")))
    definitions, errors = collect(dictionary)
    dictionary.lookup("crop", DictionaryContext("en"))
    assert errors == ["connection refused"]
    assert definitions == []


def test_cached_word_is_not_fetched_again():
    fetch = FakeFetch(json.dumps(SAMPLE).encode())
    dictionary = ApiDictionary(fetch=fetch)
    definitions, _ = collect(dictionary)
    dictionary.lookup("crop", DictionaryContext("en"))
    dictionary.lookup("crop", DictionaryContext("en"))
    assert len(fetch.urls) == 1
    assert definitions[0] is definitions[1]


def test_cache_evicts_least_recent():
    def entry(word):
        return json.dumps([{"word": word}]).encode()

    fetch = FakeFetch(entry("a"), entry("b"), entry("a"))
    dictionary = ApiDictionary(fetch=fetch, cache_size=1)
    context = DictionaryContext("en")
    dictionary.lookup("a", context)
    dictionary.lookup("b", context)
    dictionary.lookup("a", context)
    assert len(fetch.urls) == 3


def test_dictionary_is_abstract():
    with pytest.raises(TypeError):
        Dictionary()