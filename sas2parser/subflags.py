"""Sprite sub-flag definitions from the flag definition catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .binio import BinaryReader, InvalidDataError

CATALOG_VERSION = 100


def _read_count(reader: BinaryReader, what: str) -> int:
    count = reader.read_i32()
    if count < 0:
        raise InvalidDataError(f"Negative {what} count {count}")
    return count


@dataclass
class SubFlagDef:
    """Describes which optional values a sprite sub-flag carries."""

    name: str
    has_vec: bool = False
    has_rotation: bool = False
    has_flip: bool = False
    index_type0: int = 0
    index_type1: int = 0
    meta: int = 0
    options: int = 0
    item_list: list[tuple[str, str]] = field(default_factory=list)

    @classmethod
    def read(cls, reader: BinaryReader) -> "SubFlagDef":
        name = reader.read_string()
        has_vec = reader.read_bool()
        has_rotation = reader.read_bool()
        has_flip = reader.read_bool()
        index_type0 = reader.read_i32()
        index_type1 = reader.read_i32()
        meta = reader.read_i32()
        options = reader.read_i32()
        count = _read_count(reader, "item")
        items = [(reader.read_string(), reader.read_string()) for _ in range(count)]
        return cls(
            name=name,
            has_vec=has_vec,
            has_rotation=has_rotation,
            has_flip=has_flip,
            index_type0=index_type0,
            index_type1=index_type1,
            meta=meta,
            options=options,
            item_list=items,
        )


@dataclass
class SubFlagDefCatalog:
    """All sub-flag definitions, indexed by their position."""

    defs: list[SubFlagDef] = field(default_factory=list)

    @classmethod
    def load_from_bytes(cls, data: bytes) -> "SubFlagDefCatalog":
        reader = BinaryReader(data)
        if reader.read_i32() != CATALOG_VERSION:
            raise InvalidDataError("flagdefs.zfd version != 100")
        count = _read_count(reader, "definition")
        return cls([SubFlagDef.read(reader) for _ in range(count)])

    @classmethod
    def load_from_path(cls, path: str | PathLike[str]) -> "SubFlagDefCatalog":
        return cls.load_from_bytes(Path(path).read_bytes())