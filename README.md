# lightmime

Small, dependency-free building blocks for working with MIME e-mail
messages: addresses, multi-valued headers, base64 and multipart
boundaries.

## Modules

### `lightmime.address`

- `AddressType`: an enum with the members `TO`, `CC`, `BCC` and `FROM`.
- `Address`: a dataclass with `name` (optional display name), `email`,
  `type` (defaults to `AddressType.TO`) and `parsed`.
  - `str(address)` gives the e-mail part alone when there is no name.
    Otherwise it joins name and e-mail part with a space, or without one
    when the address was parsed.
- `parse_address(s)` splits `s` at its last `<`.
  - Everything before it becomes the name, trailing whitespace included.
    From the `<` on it becomes the e-mail part.
  - Without a `<` the whole string is the e-mail part.
  - The result has `parsed` set, so `str()` gives back the input unchanged.

### `lightmime.header`

`Header` is a dataclass with `name`, `values` (a list) and `parsed`.

- `set_value(value, overwrite=False)` appends a value. With `overwrite`
  true it replaces all existing values.
- `get_value(pos=0)` returns the value at `pos`.
  - It returns `None` when the header has no values.
  - It raises `IndexError` for a position out of range.
- `count()` returns the number of values.
- `str(header)` renders every value as `Name: value`, concatenated.
  - No space is added after the colon when the header is `parsed` or the
    value already starts with a space.
  - An empty or `None` value renders as `Name:`.

### `lightmime.base64codec`

Base64 with the standard alphabet.

- `encode_string(source)` encodes text (as UTF-8) or bytes without line
  breaks.
- `decode_buffer(source)` decodes to `bytes`.
  - It skips characters outside the alphabet.
  - It stops at the first `=`.
- `decode_string(source)` decodes to text, ending at the first NUL byte.
- `encode_file(infile, outfile, linelen=0)` encodes a binary file object
  into another one.
  - With a non-zero `linelen` the output is broken into CRLF-terminated
    lines of `linelen // 4` blocks.
- `decode_file(infile, outfile)` decodes a binary file object. It skips
  every character outside the alphabet, padding included.
- `encode_block(data, length)` turns up to three bytes into four
  characters, padding with `=` beyond `length`.
- `decode_block(data)` turns four 6-bit values into three bytes.

### `lightmime.boundary`

- `get_boundary(s)` extracts the `boundary=` parameter from a
  Content-Type value, or returns `None` when there is none.
  - The parameter name is matched case-insensitively.
  - An opening quote is skipped.
  - The value ends at `;` or `"` and is stripped of whitespace.
- `chomp_boundary(s, linebreak)` returns `s` up to the first `linebreak`.
  - It returns `s` unchanged when there is no line break.
  - It returns `None` when `s` starts with the line break.
- `boundary_linebreak(s, linebreak)` returns `linebreak` if it occurs in
  `s`, else `None`.

## Example

```python
from lightmime.address import parse_address
from lightmime.header import Header
from lightmime.base64codec import encode_string, decode_string
from lightmime.boundary import get_boundary

addr = parse_address("Foo Bar <foobar@example.com>")
print(str(addr))                      # Foo Bar <foobar@example.com>

h = Header("X-Foo")
h.set_value("foobar", False)
print(str(h))                         # X-Foo: foobar

print(encode_string("Test string 1")) # VGVzdCBzdHJpbmcgMQ==
print(decode_string("VGVzdCBzdHJpbmcgMQ=="))  # Test string 1

print(get_boundary('multipart/mixed; boundary="abc123"'))  # abc123
```

## What it does not do

This package provides the pieces listed above and nothing more:

- It has no message object.
- It does not parse or build whole messages, and does not split multipart
  bodies into parts.
- It does not read or write message files.
- It has no quoted-printable or encoded-word support.
- It has no command-line tool.

## Installing

```
pip install lightmime
```

To run the tests:

```
pip install "lightmime[test]"
pytest
```