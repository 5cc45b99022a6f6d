"""Content type identifiers and their codec numbers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

_U64_MAX = (1 << 64) - 1
_CUSTOM_RANGE = range(0x300000, 0x3FFFFF + 1)
_CUSTOM_NAME = "Custom"


@dataclass(frozen=True)
class ContentType:
    """A kind of content, identified by a codec number.

    The named kinds are available as class attributes (``ContentType.EVENT``,
    ``ContentType.MARKDOWN`` and so on); other codecs are represented with
    :meth:`custom`.
    """

    name: str
    value: int

    EVENT: ClassVar[ContentType]
    GRAPH: ClassVar[ContentType]
    NODE: ClassVar[ContentType]
    EDGE: ClassVar[ContentType]
    COMMAND: ClassVar[ContentType]
    QUERY: ClassVar[ContentType]
    MARKDOWN: ClassVar[ContentType]
    JSON: ClassVar[ContentType]
    YAML: ClassVar[ContentType]
    TOML: ClassVar[ContentType]
    IMAGE: ClassVar[ContentType]
    VIDEO: ClassVar[ContentType]
    AUDIO: ClassVar[ContentType]

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"codec must be an int, not {type(self.value).__name__}")
        if not 0 <= self.value <= _U64_MAX:
            raise ValueError(f"codec {self.value:#x} is outside the unsigned 64-bit range")

    @classmethod
    def custom(cls, codec: int) -> ContentType:
        """Return a custom content type carrying the given codec."""
        return cls(_CUSTOM_NAME, codec)

    @property
    def is_custom(self) -> bool:
        """Whether this is a custom content type."""
        return self.name == _CUSTOM_NAME

    def codec(self) -> int:
        """Return the codec identifier for this content type."""
        return self.value

    @classmethod
    def from_codec(cls, codec: int) -> Optional[ContentType]:
        """Map a codec identifier to a content type.

        Known codecs give the named type; other codecs in 0x300000..=0x3FFFFF
        give a custom type; anything else gives ``None``.
        """
        known = _BY_CODEC.get(codec)
        if known is not None:
            return known
        if codec in _CUSTOM_RANGE:
            return cls.custom(codec)
        return None

    def __repr__(self) -> str:
        if self.is_custom:
            return f"ContentType.custom({self.value:#x})"
        return f"ContentType.{self.name.upper()}"


_NAMED = {
    # Core CIM types
    "Event": 0x300000,
    "Graph": 0x300001,
    "Node": 0x300002,
    "Edge": 0x300003,
    "Command": 0x300004,
    "Query": 0x300005,
    # Document types
    "Markdown": 0x310000,
    "Json": 0x310001,
    "Yaml": 0x310002,
    "Toml": 0x310003,
    # Media types
    "Image": 0x320000,
    "Video": 0x320001,
    "Audio": 0x320002,
}

_BY_CODEC: dict[int, ContentType] = {}
for _name, _code in _NAMED.items():
    _member = ContentType(_name, _code)
    setattr(ContentType, _name.upper(), _member)
    _BY_CODEC[_code] = _member
del _name, _code, _member