"""Inventory item records."""

from __future__ import annotations

from dataclasses import dataclass

from ..binio import BinaryReader, BinaryWriter

MOD_FIELDS_VERSION = 20


@dataclass
class Item:
    """One inventory entry; the last three fields exist only in modded saves."""

    loot_idx: int
    count: int
    upgrade: int
    stock_piled: bool
    artifact_seed: int = -1
    item_version: int = 0
    rarity: int = 1

    @classmethod
    def read(cls, reader: BinaryReader, version: int) -> "Item":
        loot_idx = reader.read_i32()
        count = reader.read_i32()
        upgrade = reader.read_i32()
        stock_piled = reader.read_bool()
        if version >= MOD_FIELDS_VERSION:
            return cls(
                loot_idx,
                count,
                upgrade,
                stock_piled,
                artifact_seed=reader.read_i32(),
                item_version=reader.read_i32(),
                rarity=reader.read_i32(),
            )
        return cls(loot_idx, count, upgrade, stock_piled)

    def write(self, writer: BinaryWriter, version: int) -> None:
        writer.write_i32(self.loot_idx)
        writer.write_i32(self.count)
        writer.write_i32(self.upgrade)
        writer.write_bool(self.stock_piled)
        if version >= MOD_FIELDS_VERSION:
            writer.write_i32(self.artifact_seed)
            writer.write_i32(self.item_version)
            writer.write_i32(self.rarity)