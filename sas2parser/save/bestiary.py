"""Bestiary records: kills, deaths and drops per monster."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..binio import BinaryReader, BinaryWriter, InvalidDataError

TOTAL_DROPS = 5
MAX_BEASTS = 10_000


@dataclass
class BestiaryBeast:
    """Statistics for a single creature."""

    kills: int = 0
    deaths: int = 0
    drops: list[bool] = field(default_factory=lambda: [False] * TOTAL_DROPS)

    @classmethod
    def read(cls, reader: BinaryReader, version: int) -> "BestiaryBeast":
        kills = reader.read_i32()
        deaths = reader.read_i32()
        drops = [reader.read_bool() for _ in range(TOTAL_DROPS)]
        return cls(kills, deaths, drops)

    def write(self, writer: BinaryWriter, version: int) -> None:
        if len(self.drops) != TOTAL_DROPS:
            raise ValueError(f"drops must hold exactly {TOTAL_DROPS} entries")
        writer.write_i32(self.kills)
        writer.write_i32(self.deaths)
        for dropped in self.drops:
            writer.write_bool(dropped)


@dataclass
class Bestiary:
    """All creature entries in the order the save stores them."""

    beasts: list[BestiaryBeast] = field(default_factory=list)

    @classmethod
    def read(cls, reader: BinaryReader, version: int) -> "Bestiary":
        count = reader.read_i32()
        if not 0 <= count <= MAX_BEASTS:
            raise InvalidDataError(
                f"Invalid bestiary count: {count} (likely corrupted or modded format)"
            )
        return cls([BestiaryBeast.read(reader, version) for _ in range(count)])

    def write(self, writer: BinaryWriter, version: int) -> None:
        writer.write_i32(len(self.beasts))
        for beast in self.beasts:
            beast.write(writer, version)