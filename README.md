# cim-ipld

Content type identifiers for Composable Information Machines.

Every kind of content a CIM system handles has a numeric codec identifier.
The named content types have fixed codecs:

| Codec      | Name       | Codec      | Name       |
|------------|------------|------------|------------|
| `0x300000` | `EVENT`    | `0x310000` | `MARKDOWN` |
| `0x300001` | `GRAPH`    | `0x310001` | `JSON`     |
| `0x300002` | `NODE`     | `0x310002` | `YAML`     |
| `0x300003` | `EDGE`     | `0x310003` | `TOML`     |
| `0x300004` | `COMMAND`  | `0x320000` | `IMAGE`    |
| `0x300005` | `QUERY`    | `0x320001` | `VIDEO`    |
|            |            | `0x320002` | `AUDIO`    |

Any other codec from `0x300000` to `0x3FFFFF` is treated as a custom content type.

## Installation

```
pip install cim-ipld
```

## Usage

Everything lives in the `cim_ipld.types` module, in one class, `ContentType`.

```python
from cim_ipld.types import ContentType

ContentType.MARKDOWN.codec()          # 0x310000
ContentType.from_codec(0x300001)      # ContentType.GRAPH

custom = ContentType.custom(0x350000)
custom.codec()                        # 0x350000
custom.is_custom                      # True
ContentType.from_codec(0x350000) == custom   # True

ContentType.from_codec(0x999)         # None: outside the CIM range
```

- The named types are class attributes of `ContentType`. They are frozen dataclass instances with two fields: `name`, such as `"Markdown"`, and `value`, the codec.
- `ContentType.custom(codec)` makes a content type with the name `"Custom"` for any codec. The codec does not have to be in the CIM range.
- `codec()` returns the codec number.
- `is_custom` is true only for content types made by `custom`.
- `ContentType.from_codec(codec)` looks a codec up and returns one of three things:
  - the named type, when the codec is one of the fixed codecs;
  - a custom type, for any other codec in `0x300000`–`0x3FFFFF`;
  - `None`, for anything else.
- Equal name and codec mean equal content types, and they hash alike, so they can be used as dictionary keys and set members.
- A codec must be an `int` (not a `bool`) from 0 to 2⁶⁴−1. Anything else raises `TypeError` or `ValueError` when the content type is made.

## What this package does not do

This package only maps content types to codec numbers and back. It does not do any of the following:

- compute content identifiers or hashes;
- encode or decode content;
- store or fetch objects;
- classify documents.

## Running the tests

```
pip install -e ".[test]"
pytest
```