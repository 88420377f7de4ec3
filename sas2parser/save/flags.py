"""Player story flags, bounty state and the derived new-game-plus level."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..binio import BinaryReader, BinaryWriter, InvalidDataError

NG_FLAG_PREFIX = "$&ng_"
MAX_FLAGS = 10_000

_I32_TEXT = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


@dataclass
class PlayerFlags:
    """Story flags; ``ng_level`` is derived from them and not stored."""

    flags: list[str] = field(default_factory=list)
    bounty_seed: int = 0
    bounties_complete: int = 0
    ng_level: int = 0

    @classmethod
    def read(cls, reader: BinaryReader, version: int) -> "PlayerFlags":
        count = reader.read_i32()
        if not 0 <= count <= MAX_FLAGS:
            raise InvalidDataError(f"Invalid flag count: {count}")
        flags = [reader.read_string() for _ in range(count)]
        result = cls(
            flags=flags,
            bounty_seed=reader.read_i32(),
            bounties_complete=reader.read_i32(),
        )
        update_ng_level(result)
        return result

    def write(self, writer: BinaryWriter, version: int) -> None:
        writer.write_i32(len(self.flags))
        for flag in self.flags:
            writer.write_string(flag)
        writer.write_i32(self.bounty_seed)
        writer.write_i32(self.bounties_complete)


def _parse_i32(text: str) -> int | None:
    if not _I32_TEXT.fullmatch(text):
        return None
    value = int(text)
    return value if _I32_MIN <= value <= _I32_MAX else None


def update_ng_level(flags: PlayerFlags) -> None:
    """Set ``flags.ng_level`` to the highest level named by an NG flag, or 0."""
    levels = (
        _parse_i32(flag[len(NG_FLAG_PREFIX):])
        for flag in flags.flags
        if flag.startswith(NG_FLAG_PREFIX)
    )
    flags.ng_level = max((level for level in levels if level is not None), default=0)


def set_ng_level(flags: PlayerFlags, new_level: int) -> None:
    """Replace every NG flag with one for ``new_level`` (none if not positive)."""
    flags.flags[:] = [f for f in flags.flags if not f.startswith(NG_FLAG_PREFIX)]
    if new_level > 0:
        flags.flags.append(f"{NG_FLAG_PREFIX}{new_level}")
    update_ng_level(flags)