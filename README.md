# trnist

Look up English word definitions from a dictionary web API. Small panel
objects listen to a dictionary or a translator and keep the text to display.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `trnist.signals`

`Signal` is a minimal synchronous signal.

- `connect(slot)` registers a callable. It raises `TypeError` if `slot` is not
  callable.
- `disconnect(slot)` removes one registration. It raises `ValueError` if the
  slot is not connected.
- `emit(*args)` calls every connected slot in connection order.
- `len(signal)` gives the number of connected slots.

### `trnist.dictionary`

This module holds the data model. Each of these is a dataclass:

- `Definition` has `word`, `phonetic` and `meanings`.
- `Meaning` has `part_of_speech` and `explanations`.
- `Explanation` has `description` and `example`.
- `DictionaryContext` has `lang`.

`Dictionary` is the abstract base class. It has two signals,
`definition_received` and `error_occurred`, and one abstract method,
`lookup(word, context)`.

`ApiDictionary(fetch=None, cache_size=20)` queries the dictionaryapi.dev
entries endpoint.

- `lookup(word, context)` works as follows:
  - It first checks its cache. On a hit it emits `definition_received` with
    the cached `Definition`.
  - Otherwise it calls `fetch(build_url(word, context))` and passes the result
    to `parse_response`.
  - If the fetcher raises `OSError`, it emits `error_occurred` with the error
    message.
- `parse_response(data)` decodes a JSON response and builds a `Definition`
  from all the entries. It caches the result under the first entry's word,
  emits `definition_received`, and returns the definition.
  - On a body that is not a JSON array, it emits `"Invalid response format"`
    on `error_occurred` and returns `None`.
  - On an empty array, it emits `"Empty response"` on `error_occurred` and
    returns `None`.
- The cache keeps the `cache_size` most recently used definitions. A size of
  zero or less turns caching off.

Two helper functions go with it:

- `build_url(word, context)` returns the request URL, with both parts
  percent-encoded.
- `fetch_url(url)` is the default fetcher. It uses `urllib.request` with a
  30-second timeout. Network and HTTP failures raise `OSError`.

Everything runs synchronously. The signals are emitted before `lookup`
returns.

### `trnist.translator`

- `TranslatorContext` is a dataclass with `api`, `from_lang` and `to_lang`.
  The defaults are `""`, `"auto"` and `"en"`.
- `Translator` is the abstract base class. It has two signals,
  `translate_received` and `error_occurred`, and one abstract method,
  `translate(text, context)`.

### `trnist.panels`

`render_definition(definition)` turns a `Definition` into HTML with this
layout:

- a header holding the word and the phonetic;
- then, if the definition has meanings, one section per meaning, each with an
  ordered list of descriptions and examples.

`DictionaryPanel(dictionary)` connects to a dictionary's signals.

- `on_word_selected(word)` resets the retry counter and looks the word up in
  English.
- `update()` selects the word `"crop"`.
- A received definition is rendered into `text`, and `is_html` is set to
  `True`.
- On an error, the panel retries the lookup, up to a fixed limit of
  `MAX_RETRY_COUNT` (10). After that it stores the error message in `text`
  and sets `is_html` to `False`.

`TranslationPanel(translator)` connects to a translator's
`translate_received` signal.

- It stores each translation it receives in `text`.
- `update()` asks the translator to translate a sample English sentence with
  the `"yandex"` API, to Russian.

## Example

```python
import json

from trnist.dictionary import ApiDictionary, DictionaryContext
from trnist.panels import DictionaryPanel


def offline_fetch(url):
    return json.dumps([{
        "word": "crop",
        "phonetic": "/kɹɒp/",
        "meanings": [{
            "partOfSpeech": "noun",
            "definitions": [{"definition": "A harvest.", "example": "a good crop"}],
        }],
    }]).encode()


dictionary = ApiDictionary(fetch=offline_fetch)
panel = DictionaryPanel(dictionary)
panel.update()
print(panel.text)
```

Leave out `fetch` to query the live API through `fetch_url`.

## What it does not do

- The package has no concrete translator. `Translator` is only an interface,
  so you must subclass it and implement `translate` yourself.
- It has no window or command-line program. The panels only hold text; they
  do not draw anything.