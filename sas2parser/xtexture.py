"""Texture sheet metadata: the sprite cells of each texture."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .binio import BinaryReader, InvalidDataError
from .subflags import SubFlagDefCatalog

TYPE_CLOTHES = 1
TYPE_MAP = 2
TYPE_CHAR = 4


@dataclass
class XSprite:
    """A sprite cell: source rectangle (x, y, w, h), pivot and type flags."""

    src_rect: tuple[int, int, int, int]
    origin: tuple[float, float]
    flags: int = 0


def _read_count(reader: BinaryReader, what: str) -> int:
    count = reader.read_i32()
    if count < 0:
        raise InvalidDataError(f"Negative {what} count {count}")
    return count


def _skip_subflag(reader: BinaryReader, catalog: SubFlagDefCatalog) -> None:
    index = reader.read_i32()
    if not 0 <= index < len(catalog.defs):
        raise InvalidDataError(
            f"Flag def index {index} out of range (max {len(catalog.defs)})"
        )
    definition = catalog.defs[index]
    if definition.has_vec:
        reader.read_f32()
        reader.read_f32()
    if definition.has_rotation:
        reader.read_f32()
    if definition.has_flip:
        reader.read_u8()
    if definition.index_type0 > 0:
        reader.read_i32()
    if definition.index_type1 > 0:
        reader.read_i32()
    if definition.options > 0:
        reader.read_i32()


def _read_sprite(
    reader: BinaryReader, texture_type: int, flag_defs: SubFlagDefCatalog
) -> XSprite:
    reader.read_string()  # sprite name
    rect = (reader.read_i32(), reader.read_i32(), reader.read_i32(), reader.read_i32())
    origin = (reader.read_f32(), reader.read_f32())
    for _ in range(_read_count(reader, "sub-flag")):
        _skip_subflag(reader, flag_defs)

    if texture_type == TYPE_CLOTHES:
        reader.read_i32()  # character reference
        flags = reader.read_i32()
    elif texture_type in (TYPE_MAP, TYPE_CHAR):
        flags = reader.read_i32()
    else:
        flags = 0
    return XSprite(rect, origin, flags)


@dataclass
class XTextureMeta:
    """The cell array of one texture; absent cells are None."""

    cells: list[XSprite | None] = field(default_factory=list)

    @classmethod
    def _read(cls, reader: BinaryReader, flag_defs: SubFlagDefCatalog) -> "XTextureMeta":
        texture_type = reader.read_i32()
        count = _read_count(reader, "cell")
        cells = [
            _read_sprite(reader, texture_type, flag_defs) if reader.read_bool() else None
            for _ in range(count)
        ]
        return cls(cells)

    @classmethod
    def load_from_bytes(cls, data: bytes, flag_defs: SubFlagDefCatalog) -> "XTextureMeta":
        """Parse a standalone texture metadata file."""
        return cls._read(BinaryReader(data), flag_defs)

    @classmethod
    def load_from_path(
        cls, path: str | PathLike[str], flag_defs: SubFlagDefCatalog
    ) -> "XTextureMeta":
        return cls.load_from_bytes(Path(path).read_bytes(), flag_defs)

    @classmethod
    def load_all_from_master_bytes(
        cls, data: bytes, flag_defs: SubFlagDefCatalog
    ) -> dict[str, "XTextureMeta"]:
        """Parse a master bundle of named textures; names are decoded leniently."""
        reader = BinaryReader(data)
        result: dict[str, XTextureMeta] = {}
        for _ in range(_read_count(reader, "texture")):
            name = reader.read_string_lossy()
            result[name] = cls._read(reader, flag_defs)
        return result

    @classmethod
    def load_all_from_master_path(
        cls, path: str | PathLike[str], flag_defs: SubFlagDefCatalog
    ) -> dict[str, "XTextureMeta"]:
        return cls.load_all_from_master_bytes(Path(path).read_bytes(), flag_defs)