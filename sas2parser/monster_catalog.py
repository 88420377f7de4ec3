"""Monster definitions catalog: reading and writing the creature database."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .binio import MONSTER_LOGGER, BinaryReader, BinaryWriter, InvalidDataError

TEXT_SLOTS = 20

FLOAT_TYPE = 0
STRING_TYPES = frozenset({1, 3, 4, 12})
INT_TYPES = frozenset({2, 5, 6, 7, 8, 9, 10, 11, 13})

FieldValue = float | int | str


def _read_count(reader: BinaryReader, what: str) -> int:
    count = reader.read_i32()
    if count < 0:
        raise InvalidDataError(f"Negative {what} count {count}")
    return count


@dataclass
class MonsterField:
    """A typed property of a monster definition."""

    id: int
    data_type: int
    value: FieldValue

    @classmethod
    def read(cls, reader: BinaryReader) -> "MonsterField":
        field_id = reader.read_i32()
        data_type = reader.read_i32()
        if data_type == FLOAT_TYPE:
            value: FieldValue = reader.read_f32()
        elif data_type in STRING_TYPES:
            value = reader.read_string()
        elif data_type in INT_TYPES:
            value = reader.read_i32()
        else:
            raise InvalidDataError(f"Unknown data_type {data_type}")
        return cls(field_id, data_type, value)

    def write(self, writer: BinaryWriter) -> None:
        writer.write_i32(self.id)
        writer.write_i32(self.data_type)
        value = self.value
        if isinstance(value, bool):
            raise TypeError(f"unsupported monster field value {value!r}")
        if isinstance(value, int):
            writer.write_i32(value)
        elif isinstance(value, float):
            writer.write_f32(value)
        elif isinstance(value, str):
            writer.write_string(value)
        else:
            raise TypeError(f"unsupported monster field value {value!r}")


@dataclass
class MonsterDef:
    """One creature or world-object definition."""

    name: str
    titles: list[str] = field(default_factory=lambda: [""] * TEXT_SLOTS)
    descriptions: list[str] = field(default_factory=lambda: [""] * TEXT_SLOTS)
    type_: int = 0
    sub_type: int = 0
    cost: float = 0.0
    img: int = 0
    alt_img: int = 0
    texture: str = ""
    def_: str = ""
    box_width: int = 0
    box_height: int = 0
    box_sub_height: int = 0
    shadow_width: int = 0
    shadow_height: int = 0
    fields: list[MonsterField] = field(default_factory=list)
    flags: list[int] = field(default_factory=list)

    @classmethod
    def read(cls, reader: BinaryReader) -> "MonsterDef":
        name = reader.read_string()
        titles = [reader.read_string() for _ in range(TEXT_SLOTS)]
        descriptions = [reader.read_string() for _ in range(TEXT_SLOTS)]
        type_ = reader.read_i32()
        sub_type = reader.read_i32()
        cost = reader.read_f32()
        img = reader.read_i32()
        alt_img = reader.read_i32()
        texture = reader.read_string()
        def_ = reader.read_string()
        box_width = reader.read_i32()
        box_height = reader.read_i32()
        box_sub_height = reader.read_i32()
        shadow_width = reader.read_i32()
        shadow_height = reader.read_i32()
        fields = [MonsterField.read(reader) for _ in range(_read_count(reader, "field"))]
        flags = [reader.read_i32() for _ in range(_read_count(reader, "flag"))]
        return cls(
            name=name,
            titles=titles,
            descriptions=descriptions,
            type_=type_,
            sub_type=sub_type,
            cost=cost,
            img=img,
            alt_img=alt_img,
            texture=texture,
            def_=def_,
            box_width=box_width,
            box_height=box_height,
            box_sub_height=box_sub_height,
            shadow_width=shadow_width,
            shadow_height=shadow_height,
            fields=fields,
            flags=flags,
        )

    def write(self, writer: BinaryWriter) -> None:
        for label, texts in (("titles", self.titles), ("descriptions", self.descriptions)):
            if len(texts) != TEXT_SLOTS:
                raise ValueError(f"{label} must hold exactly {TEXT_SLOTS} entries")
        writer.write_string(self.name)
        for text in (*self.titles, *self.descriptions):
            writer.write_string(text)
        writer.write_i32(self.type_)
        writer.write_i32(self.sub_type)
        writer.write_f32(self.cost)
        writer.write_i32(self.img)
        writer.write_i32(self.alt_img)
        writer.write_string(self.texture)
        writer.write_string(self.def_)
        for value in (
            self.box_width,
            self.box_height,
            self.box_sub_height,
            self.shadow_width,
            self.shadow_height,
        ):
            writer.write_i32(value)
        writer.write_i32(len(self.fields))
        for monster_field in self.fields:
            monster_field.write(writer)
        writer.write_i32(len(self.flags))
        for flag in self.flags:
            writer.write_i32(flag)

    def to_bytes(self) -> bytes:
        writer = BinaryWriter()
        self.write(writer)
        return writer.getvalue()


@dataclass
class MonsterCatalog:
    """All monster definitions with an index by name."""

    monsters: list[MonsterDef] = field(default_factory=list)
    by_name: dict[str, int] = field(default_factory=dict)

    @classmethod
    def load_from_bytes(cls, data: bytes) -> "MonsterCatalog":
        reader = BinaryReader(data)
        count = _read_count(reader, "monster")
        MONSTER_LOGGER.debug("=== Starting to parse %d Monsters ===", count)

        monsters: list[MonsterDef] = []
        by_name: dict[str, int] = {}
        for idx in range(count):
            MONSTER_LOGGER.debug("--- Monster %d at position %d ---", idx, reader.position())
            monster = MonsterDef.read(reader)
            MONSTER_LOGGER.debug(
                '  name: "%s", type: %d, sub_type: %d, img: %d, fields: %d, flags: %d',
                monster.name,
                monster.type_,
                monster.sub_type,
                monster.img,
                len(monster.fields),
                len(monster.flags),
            )
            MONSTER_LOGGER.debug(
                "--- Finished Monster %d at position %d ---", idx, reader.position()
            )
            by_name[monster.name] = idx
            monsters.append(monster)
        return cls(monsters, by_name)

    def to_bytes(self) -> bytes:
        writer = BinaryWriter()
        writer.write_i32(len(self.monsters))
        for monster in self.monsters:
            monster.write(writer)
        return writer.getvalue()

    @classmethod
    def load_from_file(cls, path: str | PathLike[str]) -> "MonsterCatalog":
        return cls.load_from_bytes(Path(path).read_bytes())