from __future__ import annotations

"""Parsing of the player's colon-delimited audio/video/subtitle descriptors.

The player reports each track as ``index:language:name:codec:flag``. Only the
name is free text, so the two leading and the two trailing fields are taken
literally and anything in between is the name, delimiters included. Inputs
with fewer than five fields fill left to right and leave the rest empty.
"""

from dataclasses import dataclass
from typing import Iterable

DELIMITER = ":"
ACTIVE_FLAG = "active"


@dataclass(slots=True, frozen=True)
class StreamDescriptor:
    index: int
    language: str
    name: str
    codec: str
    active: bool = False

    def as_dict(self) -> dict[str, object]:
        return {
            "index": self.index,
            "lang": self.language,
            "name": self.name,
            "codec": self.codec,
            "active": self.active,
        }

    def to_raw(self) -> str:
        flag = ACTIVE_FLAG if self.active else ""
        return DELIMITER.join((str(self.index), self.language, self.name, self.codec, flag))


def _parse_index(token: str) -> int:
    try:
        value = int(token)
    except ValueError:
        return 0
    return value if value >= 0 else 0


def parse_stream_descriptor(raw: str) -> StreamDescriptor:
    tokens = raw.split(DELIMITER)
    if len(tokens) > 5:
        tokens = tokens[:2] + [DELIMITER.join(tokens[2:-2])] + tokens[-2:]
    tokens += [""] * (5 - len(tokens))
    index, language, name, codec, flag = tokens

    return StreamDescriptor(
        index=_parse_index(index),
        language=language,
        name=name,
        codec=codec,
        active=flag == ACTIVE_FLAG,
    )


def parse_stream_descriptors(raws: Iterable[str]) -> list[StreamDescriptor]:
    return [parse_stream_descriptor(str(raw)) for raw in raws]
