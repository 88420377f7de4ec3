"""Whole save files: header, XOR obfuscation, payload and MD5 checksum."""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass, field

from ..binio import (
    BinaryReader,
    BinaryWriter,
    HashMismatchError,
    InvalidDataError,
    xor_data,
)
from .bestiary import Bestiary
from .equipment import Equipment
from .flags import PlayerFlags
from .stats import Stats

_log = logging.getLogger(__name__)

MOD_VERSION_OFFSET = 100
MOD_XOR_KEY = 19
HASH_VERSION = 18
HASH_LEN = 16
COSMETIC_SLOTS = 11
_VERSION_FIELD_LEN = 4
_LEGACY_PADDING_INTS = 10


@dataclass(frozen=True)
class _Layout:
    """Format decisions derived from the raw version number."""

    base_version: int
    xor_key: int
    is_mod: bool

    @classmethod
    def for_version(cls, raw_version: int) -> "_Layout":
        if raw_version > MOD_VERSION_OFFSET:
            return cls(raw_version - MOD_VERSION_OFFSET, MOD_XOR_KEY, True)
        xor_key = raw_version if raw_version in (18, 19) else 0
        return cls(raw_version, xor_key, False)

    @property
    def has_hash(self) -> bool:
        return self.base_version >= HASH_VERSION

    @property
    def has_padding(self) -> bool:
        return self.base_version < 19 and not self.is_mod


@dataclass
class SaveData:
    """A complete character save; ``version`` is the raw number from the file."""

    version: int
    name: str = ""
    stats: Stats = field(default_factory=Stats)
    equipment: Equipment = field(default_factory=Equipment)
    flags: PlayerFlags = field(default_factory=PlayerFlags)
    bestiary: Bestiary = field(default_factory=Bestiary)
    cosmetics: list[int] = field(default_factory=lambda: [0] * COSMETIC_SLOTS)
    hash_data: bytes | None = None
    custom_hash_override: bytes | None = None

    @classmethod
    def from_bytes(cls, data: bytes) -> "SaveData":
        """Parse a save file, checking its length and checksum."""
        data = bytes(data)
        raw_version = BinaryReader(data).read_i32()
        layout = _Layout.for_version(raw_version)

        hash_len = HASH_LEN if layout.has_hash else 0
        payload_len = len(data) - _VERSION_FIELD_LEN - hash_len
        if payload_len < 0:
            raise InvalidDataError(f"Save data too short: {len(data)} bytes")

        payload_end = _VERSION_FIELD_LEN + payload_len
        payload = data[_VERSION_FIELD_LEN:payload_end]
        stored_hash = data[payload_end:] if layout.has_hash else None
        if layout.xor_key:
            payload = xor_data(payload, layout.xor_key)

        reader = BinaryReader(payload)
        base = layout.base_version
        name = reader.read_string()
        stats = Stats.read(reader, base)
        equipment = Equipment.read(reader, base)
        flags = PlayerFlags.read(reader, base)
        if layout.has_padding:
            for _ in range(_LEGACY_PADDING_INTS):
                reader.read_i32()
        bestiary = Bestiary.read(reader, base)
        cosmetics = [reader.read_i32() for _ in range(COSMETIC_SLOTS)]

        consumed = reader.position()
        if consumed != payload_len:
            raise InvalidDataError(f"Read {consumed} bytes, expected {payload_len}")

        _log.debug(
            "loaded save %r: raw version %d, base %d, mod %s, xor %d, "
            "%d items, %d flags, %d beasts, payload %d bytes",
            name,
            raw_version,
            base,
            layout.is_mod,
            layout.xor_key,
            len(equipment.inventory_items),
            len(flags.flags),
            len(bestiary.beasts),
            payload_len,
        )

        if stored_hash is not None and hashlib.md5(payload).digest() != stored_hash:
            raise HashMismatchError()

        return cls(
            version=raw_version,
            name=name,
            stats=stats,
            equipment=equipment,
            flags=flags,
            bestiary=bestiary,
            cosmetics=cosmetics,
            hash_data=stored_hash,
        )

    def _serialise(self, raw_version: int) -> bytes:
        if len(self.cosmetics) != COSMETIC_SLOTS:
            raise ValueError(f"cosmetics must hold exactly {COSMETIC_SLOTS} entries")
        if self.custom_hash_override is not None and len(self.custom_hash_override) != HASH_LEN:
            raise ValueError(f"custom_hash_override must be {HASH_LEN} bytes")

        layout = _Layout.for_version(raw_version)
        base = layout.base_version

        body = BinaryWriter()
        body.write_string(self.name)
        self.stats.write(body, base)
        self.equipment.write(body, base)
        self.flags.write(body, base)
        if layout.has_padding:
            for _ in range(_LEGACY_PADDING_INTS):
                body.write_i32(0)
        self.bestiary.write(body, base)
        for value in self.cosmetics:
            body.write_i32(value)
        payload = body.getvalue()

        if self.custom_hash_override is not None:
            digest = bytes(self.custom_hash_override)
        else:
            digest = hashlib.md5(payload).digest()

        if layout.xor_key:
            payload = xor_data(payload, layout.xor_key)

        out = BinaryWriter()
        out.write_i32(raw_version)
        out.write_bytes(payload)
        if layout.has_hash:
            out.write_bytes(digest)
        return out.getvalue()

    def to_bytes(self) -> bytes:
        """Serialise using the save's own version."""
        return self._serialise(self.version)

    def to_vanilla_bytes(self, target_version: int) -> bytes:
        """Serialise in the unmodded format of ``target_version`` (at most 100)."""
        if target_version > MOD_VERSION_OFFSET:
            raise InvalidDataError("Vanilla version must be ≤ 100")
        return self._serialise(target_version)