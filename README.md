# wikikit

Low-level building blocks for tools that process MediaWiki markup from
Wikipedia and Wiktionary. The package is a library only and has no
command-line program. It depends on nothing outside the standard library.

## Modules

### `wikikit.text`

String helpers that work on `str` and treat only ASCII whitespace as
whitespace.

- `trim_left`, `trim_right`, `trim` and `collapse_whitespace`.
  `collapse_whitespace` turns each run of whitespace into a single space.
- `to_lower_ascii`, `to_upper_ascii`, `equals_ignore_case_ascii` and
  `starts_with_ignore_case_ascii` change or compare ASCII letters only.
- `starts_with` and `ends_with`.
- `split(s, delimiter)` keeps empty parts. `split_n(s, delimiter, max_parts)`
  puts the rest of the string into the last part. It returns `[]` when
  `max_parts` is 0 and raises `ValueError` when it is negative.
  `split_any(s, delimiters)` splits on any of the characters and drops
  empty parts. `join(parts, separator)` joins parts with the separator.
- `replace_all` and `replace_first`. `count_occurrences` and `find_all`
  count or locate non-overlapping matches. An empty pattern finds nothing.
- `parse_int(s)` parses an optionally negative decimal integer. Whitespace
  around it is allowed. It returns `None` if the text is not such an integer.
- `decode_html_entities` handles `&amp; &lt; &gt; &quot; &apos; &nbsp;` and
  decimal or hex numeric references. `encode_html_entities` escapes
  `& < > " '`. `strip_tags` removes everything between `<` and `>`.
- `split_lines`, `count_lines` and `get_line` handle `\n`, `\r\n` and `\r`.
  `get_line` returns `None` when the line number is out of range.

### `wikikit.unicode_utils`

- UTF-8 helpers work on `bytes`. A `str` is first encoded as UTF-8.
  - `is_valid_utf8` rejects overlong forms, surrogates and values past
    U+10FFFF.
  - `utf8_char_length` returns the length of a sequence from its lead byte.
  - `count_codepoints` counts code points.
  - `decode_utf8(data, pos)` returns `(codepoint, next_pos)`, or `None`.
  - `encode_utf8(codepoint)` returns `bytes`.
- Case mapping:
  - `to_lower` and `to_upper` use full Unicode mapping, so `"straße"`
    becomes `"STRASSE"`.
  - `to_title_case` capitalises each word.
  - `capitalize_first` uppercases only the first character.
- `normalize(s, form)` takes a `NormalizationForm` (`NFC`, `NFD`, `NFKC` or
  `NFKD`).
- Character classes: `is_whitespace`, `is_letter`, `is_digit`,
  `is_alphanumeric` and `is_punctuation`. Each accepts an integer code point
  or a single character.
- Title helpers:
  - `normalize_title` trims the title and turns underscores into spaces. It
    then collapses whitespace, drops any `#fragment` and capitalises the
    first character.
  - `normalize_for_comparison` lowercases the first character only.
  - `title_to_url` and `url_to_title` convert between titles and
    percent-encoded URL form. Spaces in a title become underscores.
- `Utf8Iterator(data, pos=0)` and `utf8_codepoints(data)` iterate over code
  points. Each step yields a code point, and malformed bytes yield U+FFFD.
  - `current()` returns the code point at the current position, or 0 at the
    end.
  - `byte_position()` returns the current byte offset.

### `wikikit.string_pool`

- `StringPool` is guarded by a lock. `UnsafeStringPool` has no lock.
- Both provide `intern`, `contains`, `find`, `len()`, `memory_usage`,
  `clear` and `reserve`.
- `intern` returns an `InternedString`.
  - Two handles compare equal when they refer to the same pool entry.
  - A handle also compares equal to a plain `str` with the same text.
  - `find` returns a falsy empty handle when the string is not in the pool.
- `global_string_pool()` returns a pool shared by the whole process.

### `wikikit.line_reader`

- `LineReader` is the abstract base.
  - `read_line()` returns the next line without its terminator, or `None`
    at the end.
  - `eof()` reports whether the end has been reached.
  - Iterating over a reader yields its lines.
- `BufferedLineReader(stream, buffer_size=512 * 1024)` reads text or binary
  streams in blocks. It accepts `\n`, `\r\n` and `\r` endings, including
  lines that span blocks.
- `StreamLineReader(stream)` uses the stream's `readline`. Only `\n` ends a
  line, so a `\r` before it stays in the line.

### `wikikit.model`

Shared data types:

- `SourcePosition` and `SourceRange`, which has `length`, `is_empty` and
  `contains`.
- `ErrorSeverity` and `ParseError`. `format()` produces a readable message
  with the location and context.
- `Namespace`.
- `PageInfo`, which has `is_redirect`.
- `LocatedString`.

## What this package does not do

The package does not parse wikitext itself. It does not build a syntax tree
or expand templates. It cannot read compressed XML dumps or their indexes,
and it does not convert pages to plain text or JSON. It provides only the
text, Unicode, interning, line-reading and data-type helpers listed above.

## Installation

```
pip install .
```

## Examples

```python
import io

from wikikit import text, unicode_utils
from wikikit.line_reader import BufferedLineReader
from wikikit.string_pool import StringPool

text.split("a,b,c", ",")                 # ['a', 'b', 'c']
text.decode_html_entities("&lt;b&gt;")   # '<b>'
text.parse_int("  42 ")                  # 42

unicode_utils.normalize_title("hello_world#intro")   # 'Hello world'
unicode_utils.title_to_url("C++")                    # 'C%2B%2B'

pool = StringPool()
a = pool.intern("Infobox")
b = pool.intern("Infobox")
assert a == b and len(pool) == 1

reader = BufferedLineReader(io.BytesIO(b"one\r\ntwo\rthree"))
for line in reader:
    print(line)   # b'one', b'two', b'three'
```

## Running the tests

```
pip install .[test]
pytest
```