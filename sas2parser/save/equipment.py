"""Inventory contents and equipped slots."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..binio import BinaryReader, BinaryWriter, InvalidDataError
from .item import Item

EQUIPPED_SLOTS = 31
MAX_INVENTORY = 100_000


@dataclass
class Equipment:
    """Inventory items plus the inventory index held in each equipment slot."""

    inventory_items: list[Item] = field(default_factory=list)
    equipped_items: list[int] = field(default_factory=lambda: [-1] * EQUIPPED_SLOTS)

    @classmethod
    def read(cls, reader: BinaryReader, version: int) -> "Equipment":
        count = reader.read_i32()
        if not 0 <= count <= MAX_INVENTORY:
            raise InvalidDataError(f"Invalid inventory count: {count}")
        items = [Item.read(reader, version) for _ in range(count)]
        equipped = [reader.read_i32() for _ in range(EQUIPPED_SLOTS)]
        return cls(items, equipped)

    def write(self, writer: BinaryWriter, version: int) -> None:
        if len(self.equipped_items) != EQUIPPED_SLOTS:
            raise ValueError(f"equipped_items must hold exactly {EQUIPPED_SLOTS} entries")
        writer.write_i32(len(self.inventory_items))
        for item in self.inventory_items:
            item.write(writer, version)
        for slot in self.equipped_items:
            writer.write_i32(slot)