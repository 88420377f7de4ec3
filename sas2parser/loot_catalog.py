"""Loot definitions catalog: reading and writing the item database."""

from __future__ import annotations

from dataclasses import dataclass, field

from .binio import LOOT_LOGGER, BinaryReader, BinaryWriter, InvalidDataError

TEXT_SLOTS = 20

FLOAT_TYPE = 0
INT_TYPE = 2
BOOL_TYPE = 3
MAGIC_INDEX_TYPE = 6
STRING_TYPES = frozenset({1, 4, 5, 7})

FieldValue = float | int | bool | str


def _read_count(reader: BinaryReader, what: str) -> int:
    count = reader.read_i32()
    if count < 0:
        raise InvalidDataError(f"Negative {what} count {count}")
    return count


@dataclass
class LootField:
    """A typed property of a loot definition."""

    id: int
    data_type: int
    value: FieldValue

    @classmethod
    def read(cls, reader: BinaryReader) -> "LootField":
        start = reader.position()
        field_id = reader.read_i32()
        data_type = reader.read_i32()
        if data_type == FLOAT_TYPE:
            value: FieldValue = reader.read_f32()
        elif data_type in (INT_TYPE, MAGIC_INDEX_TYPE):
            value = reader.read_i32()
        elif data_type == BOOL_TYPE:
            value = reader.read_bool()
        elif data_type in STRING_TYPES:
            value = reader.read_string()
        else:
            raise InvalidDataError(f"Unknown field type {data_type} at pos {start}")
        return cls(field_id, data_type, value)

    def write(self, writer: BinaryWriter) -> None:
        writer.write_i32(self.id)
        writer.write_i32(self.data_type)
        value = self.value
        if isinstance(value, bool):
            writer.write_bool(value)
        elif isinstance(value, int):
            writer.write_i32(value)
        elif isinstance(value, float):
            writer.write_f32(value)
        elif isinstance(value, str):
            writer.write_string(value)
        else:
            raise TypeError(f"unsupported loot field value {value!r}")


@dataclass
class LootDef:
    """One item definition with localised titles and descriptions."""

    name: str
    title: list[str] = field(default_factory=lambda: [""] * TEXT_SLOTS)
    description: list[str] = field(default_factory=lambda: [""] * TEXT_SLOTS)
    type_: int = 0
    sub_type: int = 0
    cost: float = 0.0
    img: int = 0
    alt_img: int = 0
    texture: str = ""
    fields: list[LootField] = field(default_factory=list)
    flags: list[int] = field(default_factory=list)
    token_loot: str = ""
    token_cost: int = 0
    id: int = 0

    @classmethod
    def read(cls, reader: BinaryReader) -> "LootDef":
        log = LOOT_LOGGER
        name = reader.read_string()
        log.debug('  name: "%s" at pos %d', name, reader.position())
        title = [reader.read_string() for _ in range(TEXT_SLOTS)]
        description = [reader.read_string() for _ in range(TEXT_SLOTS)]
        type_ = reader.read_i32()
        sub_type = reader.read_i32()
        cost = reader.read_f32()
        img = reader.read_i32()
        alt_img = reader.read_i32()
        texture = reader.read_string()
        log.debug(
            "  type_: %d, sub_type: %d, cost: %s, img: %d, alt_img: %d, texture: %r",
            type_, sub_type, cost, img, alt_img, texture,
        )

        field_count = _read_count(reader, "field")
        log.debug("  field_count: %d at pos %d", field_count, reader.position())
        fields = [LootField.read(reader) for _ in range(field_count)]

        flag_count = _read_count(reader, "flag")
        log.debug("  flag_count: %d at pos %d", flag_count, reader.position())
        flags = [reader.read_i32() for _ in range(flag_count)]

        token_loot = reader.read_string()
        token_cost = reader.read_i32()
        log.debug(
            '  token_loot: "%s", token_cost: %d at pos %d',
            token_loot, token_cost, reader.position(),
        )
        return cls(
            name=name,
            title=title,
            description=description,
            type_=type_,
            sub_type=sub_type,
            cost=cost,
            img=img,
            alt_img=alt_img,
            texture=texture,
            fields=fields,
            flags=flags,
            token_loot=token_loot,
            token_cost=token_cost,
        )

    def write(self, writer: BinaryWriter) -> None:
        writer.write_string(self.name)
        for text in self.title:
            writer.write_string(text)
        for text in self.description:
            writer.write_string(text)
        writer.write_i32(self.type_)
        writer.write_i32(self.sub_type)
        writer.write_f32(self.cost)
        writer.write_i32(self.img)
        writer.write_i32(self.alt_img)
        writer.write_string(self.texture)
        writer.write_i32(len(self.fields))
        for loot_field in self.fields:
            loot_field.write(writer)
        writer.write_i32(len(self.flags))
        for flag in self.flags:
            writer.write_i32(flag)
        writer.write_string(self.token_loot)
        writer.write_i32(self.token_cost)

    def to_bytes(self) -> bytes:
        writer = BinaryWriter()
        self.write(writer)
        return writer.getvalue()


def _find_index(defs: list[LootDef], name: str, title_text: str) -> int | None:
    for idx, loot in enumerate(defs):
        if loot.name == name:
            return idx
    for idx, loot in enumerate(defs):
        if any(title_text in t for t in loot.title):
            return idx
    return None


@dataclass
class LootCatalog:
    """All loot definitions with a name index and the starstone positions."""

    loot_defs: list[LootDef] = field(default_factory=list)
    by_name: dict[str, int] = field(default_factory=dict)
    black_starstone_index: int | None = None
    gray_starstone_index: int | None = None

    @classmethod
    def load_from_bytes(cls, data: bytes) -> "LootCatalog":
        reader = BinaryReader(data)
        count = _read_count(reader, "loot definition")
        LOOT_LOGGER.debug("=== Starting to parse %d LootDefs", count)

        defs: list[LootDef] = []
        by_name: dict[str, int] = {}
        for idx in range(count):
            LOOT_LOGGER.debug("--- LootDef %d at position %d ---", idx, reader.position())
            loot = LootDef.read(reader)
            LOOT_LOGGER.debug(
                "--- Finished LootDef %d at position %d ---", idx, reader.position()
            )
            by_name[loot.name] = idx
            defs.append(loot)

        return cls(
            loot_defs=defs,
            by_name=by_name,
            black_starstone_index=_find_index(defs, "black_pearl", "Black Starstone"),
            gray_starstone_index=_find_index(defs, "gray_pearl", "Gray Starstone"),
        )

    def to_bytes(self) -> bytes:
        writer = BinaryWriter()
        writer.write_i32(len(self.loot_defs))
        for loot in self.loot_defs:
            loot.write(writer)
        return writer.getvalue()