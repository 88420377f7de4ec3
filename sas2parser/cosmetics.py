"""Character-creation cosmetic catalogs: ancestry, beard, class, colours, crimes, eyes, hair, sex."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any, Sequence

_F32 = struct.Struct("<f")


def _f32(value: float) -> float:
    """Round ``value`` to single precision."""
    return _F32.unpack(_F32.pack(value))[0]


def _to_u8(value: float) -> int:
    """Truncate toward zero and saturate into the 0..255 range."""
    return max(0, min(255, int(value)))


def _burnt(r: int, g: int, b: int) -> tuple[int, int, int]:
    """Greyish tint used for hazeburnt characters, computed in single precision."""
    avg = _f32(_f32(float(r + g + b) / _f32(255.0)) / _f32(3.0))
    factors = (0.7, 0.75, 0.8)
    return tuple(
        _to_u8(_f32(_f32(avg * _f32(factor)) * _f32(255.0))) for factor in factors
    )  # type: ignore[return-value]


def _name_at(entries: Sequence[Any], idx: int) -> str | None:
    """Name of the entry at ``idx``, or None when there is none."""
    if 0 <= idx < len(entries):
        return entries[idx].name
    return None


@dataclass(frozen=True)
class Ancestry:
    name: str
    path: str


@dataclass(frozen=True)
class Beard:
    name: str
    img: tuple[str | None, str | None]


@dataclass(frozen=True)
class CosmeticClass:
    name: str


@dataclass(frozen=True)
class CosmeticColor:
    name: str
    r: int
    g: int
    b: int
    burnt_r: int
    burnt_g: int
    burnt_b: int

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, name: str) -> "CosmeticColor":
        return cls(name, r, g, b, *_burnt(r, g, b))


@dataclass(frozen=True)
class Crime:
    name: str


@dataclass(frozen=True)
class EyeColor:
    name: str
    r: int
    g: int
    b: int
    burnt_r: int
    burnt_g: int
    burnt_b: int

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, name: str) -> "EyeColor":
        return cls(name, r, g, b, *_burnt(r, g, b))


@dataclass(frozen=True)
class Hair:
    name: str
    img: tuple[str | None, str | None, str | None]


@dataclass(frozen=True)
class Sex:
    name: str
    path: str


class AncestryCatalog:
    """Playable ancestries and their sprite folders."""

    _ENTRIES: tuple[Ancestry, ...] = (
        Ancestry("Dusk", "hero2"),
        Ancestry("Highlander", "hero"),
        Ancestry("Mountain", "hero6"),
        Ancestry("Oasis", "hero7"),
        Ancestry("Sun", "hero4"),
        Ancestry("Wood", "hero3"),
        Ancestry("Valley", "hero5"),
        Ancestry("Jinderen", "hero8"),
        Ancestry("Gulchmire", "hero9"),
    )

    @classmethod
    def all(cls) -> tuple[Ancestry, ...]:
        return cls._ENTRIES

    @classmethod
    def count(cls) -> int:
        return len(cls._ENTRIES)

    @classmethod
    def name(cls, idx: int) -> str | None:
        return _name_at(cls._ENTRIES, idx)


class BeardCatalog:
    """Beard styles with their normal and hooded images."""

    _ENTRIES: tuple[Beard, ...] = (
        Beard("None", (None, None)),
        Beard("Beard", ("beard_beard", "beard_beard")),
        Beard("Bushy", ("beard_bushy", "beard_bushy_hood")),
        Beard("Trimmed", ("beard_trimmed", "beard_trimmed")),
        Beard("Moustache", ("beard_moustache", "beard_moustache")),
        Beard("Goatee", ("beard_goatee", "beard_goatee")),
        Beard("Only Goat", ("beard_onlygoat", "beard_onlygoat")),
        Beard("Chops", ("beard_chops", None)),
    )

    @classmethod
    def all(cls) -> tuple[Beard, ...]:
        return cls._ENTRIES

    @classmethod
    def count(cls) -> int:
        return len(cls._ENTRIES)

    @classmethod
    def name(cls, idx: int) -> str | None:
        return _name_at(cls._ENTRIES, idx)


class ClassCatalog:
    """Starting classes."""

    _ENTRIES: tuple[CosmeticClass, ...] = tuple(
        CosmeticClass(name)
        for name in (
            "Assassin",
            "Cleric",
            "Duelist",
            "Fighter",
            "Highblade",
            "Paladin",
            "Ranger",
            "Sage",
        )
    )

    @classmethod
    def all(cls) -> tuple[CosmeticClass, ...]:
        return cls._ENTRIES

    @classmethod
    def count(cls) -> int:
        return len(cls._ENTRIES)

    @classmethod
    def name(cls, idx: int) -> str | None:
        return _name_at(cls._ENTRIES, idx)


class ColorCatalog:
    """Hair and beard colours."""

    _ENTRIES: tuple[CosmeticColor, ...] = tuple(
        CosmeticColor.from_rgb(*entry)
        for entry in (
            (242, 212, 176, "Sunflower Blonde"),
            (242, 226, 201, "Pure Diamond"),
            (186, 141, 112, "Caramel"),
            (241, 212, 182, "Light Ash Blonde"),
            (249, 222, 177, "Light Blonde"),
            (160, 115, 86, "Hot Toffee"),
            (178, 133, 102, "Sparkling Amber"),
            (160, 129, 111, "Havana Brown"),
            (219, 180, 141, "Beeline Honey"),
            (181, 137, 108, "Medium Champagne"),
            (118, 88, 78, "Espresso"),
            (102, 68, 58, "French Roast"),
            (204, 128, 79, "Copper Shimmer"),
            (113, 95, 73, "Light Cool Brown"),
            (96, 74, 60, "Light Brown"),
            (160, 81, 84, "Ruby Fusion"),
            (134, 84, 83, "Crushed Garnet"),
            (111, 63, 77, "Blowout Burgundy"),
            (90, 67, 53, "Chocolate Brown"),
            (88, 65, 47, "Dark Golden Brown"),
            (125, 87, 100, "Chocolate Cherry"),
            (108, 81, 88, "Midnight Ruby"),
            (52, 55, 64, "Leather Black"),
            (220, 161, 129, "Reddish Blonde"),
            (135, 79, 54, "Light Auburn"),
            (255, 0, 0, "Red"),
            (255, 0, 255, "Purple"),
            (255, 150, 255, "Pink"),
            (50, 70, 255, "Blue"),
            (0, 200, 255, "Teal"),
            (0, 255, 0, "Green"),
        )
    )

    @classmethod
    def all(cls) -> tuple[CosmeticColor, ...]:
        return cls._ENTRIES

    @classmethod
    def count(cls) -> int:
        return len(cls._ENTRIES)

    @classmethod
    def name(cls, idx: int) -> str | None:
        return _name_at(cls._ENTRIES, idx)


class CrimeCatalog:
    """Crimes a character can be branded with."""

    _ENTRIES: tuple[Crime, ...] = tuple(
        Crime(name)
        for name in (
            "Alchemy",
            "Arson",
            "Blasphemy",
            "Brigandry",
            "Drunkenness",
            "Forgery",
            "Heresy",
            "Lasciviousness",
            "Smuggling",
            "Sumptuousness",
            "Usury",
            "Vagrancy",
        )
    )

    @classmethod
    def all(cls) -> tuple[Crime, ...]:
        return cls._ENTRIES

    @classmethod
    def count(cls) -> int:
        return len(cls._ENTRIES)

    @classmethod
    def name(cls, idx: int) -> str | None:
        return _name_at(cls._ENTRIES, idx)


class EyeCatalog:
    """Eye colours."""

    _ENTRIES: tuple[EyeColor, ...] = tuple(
        EyeColor.from_rgb(*entry)
        for entry in (
            (118, 112, 47, "Amber"),
            (0, 144, 255, "Blue"),
            (137, 100, 56, "Brown"),
            (62, 188, 98, "Emerald"),
            (255, 234, 0, "Gold"),
            (0, 228, 255, "Sapphire"),
            (157, 157, 157, "Silver"),
        )
    )

    @classmethod
    def all(cls) -> tuple[EyeColor, ...]:
        return cls._ENTRIES

    @classmethod
    def count(cls) -> int:
        return len(cls._ENTRIES)

    @classmethod
    def name(cls, idx: int) -> str | None:
        return _name_at(cls._ENTRIES, idx)


def _hair(name: str, image: str | None) -> Hair:
    return Hair(name, (image, None, None))


class HairCatalog:
    """Hair styles."""

    _ENTRIES: tuple[Hair, ...] = (
        _hair("Bald", None),
        _hair("Short", "hair_short"),
        _hair("Shaggy", "hair_shaggy"),
        _hair("Bun", "hair_bun"),
        _hair("Fade", "hair_fade"),
        _hair("Princess", "hair_princess"),
        _hair("Monastic", "hair_monastic"),
        _hair("Mohawk", "hair_mohawk"),
        _hair("Messy", "hair_messy"),
        _hair("Slick", "hair_slick"),
        _hair("Curly", "hair_curly"),
        _hair("Natural", "hair_natural"),
        _hair("Balding", "hair_balding"),
        _hair("Novel", "hair_novel"),
        _hair("Twist Fade", "hair_twistfade"),
        _hair("Short Fade", "hair_shortfade"),
        _hair("Clean Fade", "hair_cleanfade"),
        _hair("Fade Hawk", "hair_fadehawk"),
        _hair("Curly Hawk", "hair_curlyhawk"),
    )

    @classmethod
    def all(cls) -> tuple[Hair, ...]:
        return cls._ENTRIES

    @classmethod
    def count(cls) -> int:
        return len(cls._ENTRIES)

    @classmethod
    def name(cls, idx: int) -> str | None:
        return _name_at(cls._ENTRIES, idx)

    @classmethod
    def ordered_indices(cls) -> list[int]:
        """Hair indices ordered alphabetically by name."""
        return sorted(range(len(cls._ENTRIES)), key=lambda i: cls._ENTRIES[i].name)


class SexCatalog:
    """Body types and their sprite folders."""

    _ENTRIES: tuple[Sex, ...] = (
        Sex("Male", "male"),
        Sex("Female", "female"),
    )

    @classmethod
    def all(cls) -> tuple[Sex, ...]:
        return cls._ENTRIES

    @classmethod
    def count(cls) -> int:
        return len(cls._ENTRIES)

    @classmethod
    def name(cls, idx: int) -> str | None:
        return _name_at(cls._ENTRIES, idx)