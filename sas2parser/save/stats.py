"""Character statistics block of a save file."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..binio import BinaryReader, BinaryWriter

STAT_COUNT = 9
ITEM_CLASS_COUNT = 40
TREE_UNLOCK_COUNT = 500
CLASS_UNLOCK_COUNT = 3


def _check_length(name: str, values: list[int], expected: int) -> None:
    if len(values) != expected:
        raise ValueError(f"{name} must hold exactly {expected} entries, got {len(values)}")


@dataclass
class Stats:
    """Level, attributes, currencies and unlock tables of a character."""

    level: int = 0
    stats: list[int] = field(default_factory=lambda: [0] * STAT_COUNT)
    xp: int = 0
    silver: int = 0
    dropped_xp: int = 0
    dropped_xp_area: int = 0
    dropped_xp_vec: tuple[float, float] = (0.0, 0.0)
    time_played: float = 0.0
    hazeburnt: bool = False
    item_class: list[int] = field(default_factory=lambda: [0] * ITEM_CLASS_COUNT)
    tree_unlocks: list[int] = field(default_factory=lambda: [0] * TREE_UNLOCK_COUNT)
    class_unlocks: list[int] = field(default_factory=lambda: [0] * CLASS_UNLOCK_COUNT)

    @classmethod
    def read(cls, reader: BinaryReader, version: int) -> "Stats":
        def ints(count: int) -> list[int]:
            return [reader.read_i32() for _ in range(count)]

        level = reader.read_i32()
        stats = ints(STAT_COUNT)
        xp = reader.read_i64()
        silver = reader.read_i64()
        dropped_xp = reader.read_i64()
        dropped_xp_area = reader.read_i32()
        dropped_xp_vec = (reader.read_f32(), reader.read_f32())
        time_played = reader.read_f64()
        hazeburnt = reader.read_bool()
        return cls(
            level=level,
            stats=stats,
            xp=xp,
            silver=silver,
            dropped_xp=dropped_xp,
            dropped_xp_area=dropped_xp_area,
            dropped_xp_vec=dropped_xp_vec,
            time_played=time_played,
            hazeburnt=hazeburnt,
            item_class=ints(ITEM_CLASS_COUNT),
            tree_unlocks=ints(TREE_UNLOCK_COUNT),
            class_unlocks=ints(CLASS_UNLOCK_COUNT),
        )

    def write(self, writer: BinaryWriter, version: int) -> None:
        _check_length("stats", self.stats, STAT_COUNT)
        _check_length("item_class", self.item_class, ITEM_CLASS_COUNT)
        _check_length("tree_unlocks", self.tree_unlocks, TREE_UNLOCK_COUNT)
        _check_length("class_unlocks", self.class_unlocks, CLASS_UNLOCK_COUNT)

        writer.write_i32(self.level)
        for value in self.stats:
            writer.write_i32(value)
        writer.write_i64(self.xp)
        writer.write_i64(self.silver)
        writer.write_i64(self.dropped_xp)
        writer.write_i32(self.dropped_xp_area)
        x, y = self.dropped_xp_vec
        writer.write_f32(x)
        writer.write_f32(y)
        writer.write_f64(self.time_played)
        writer.write_bool(self.hazeburnt)
        for table in (self.item_class, self.tree_unlocks, self.class_unlocks):
            for value in table:
                writer.write_i32(value)