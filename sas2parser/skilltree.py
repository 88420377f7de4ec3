"""Skill tree node catalog."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .binio import BinaryReader, InvalidDataError

LANGUAGE_COUNT = 13

STAT_NAMES = (
    "Strength",
    "Dexterity",
    "Vitality",
    "Will",
    "Endurance",
    "Arcana",
    "Conviction",
    "Resolve",
    "Luck",
)

# Texture atlas icon index for each node type.
SKILL_IMG = (
    22, 23, 24, 25, 26, 27, 28, 29, 30, 31, 10, 12, 11, 40, 43, 41, 39, 14, 46, 42, 13, 15, 45, 47,
    44, 37, 34, 141, 157, 205, 173, 189,
)


@dataclass
class SkillNode:
    """One node of the skill tree with localised texts in every language."""

    id: int
    name: str
    titles: list[str] = field(default_factory=list)
    descriptions: list[str] = field(default_factory=list)
    base_descriptions: list[str] = field(default_factory=list)
    node_type: int = 0
    value: int = 0
    cost: int = 0
    parents: tuple[int, int] = (0, 0)
    loc_x: float = 0.0
    loc_y: float = 0.0

    def max_unlock(self) -> int:
        """How many times the node can be unlocked."""
        if self.cost > 1:
            return 1
        return 5 if self.node_type <= 8 else 1

    def stat_name(self) -> str | None:
        """The attribute this node raises, or None if it is not a stat node."""
        if 0 <= self.node_type < len(STAT_NAMES):
            return STAT_NAMES[self.node_type]
        return None


@dataclass
class SkillTreeCatalog:
    """All skill nodes; a node's ``id`` is its position in the file."""

    nodes: list[SkillNode] = field(default_factory=list)

    @classmethod
    def load_from_bytes(cls, data: bytes) -> "SkillTreeCatalog":
        reader = BinaryReader(data)
        count = reader.read_i32()
        if count < 0:
            raise InvalidDataError(f"Negative skill node count {count}")
        return cls([_read_node(reader, node_id) for node_id in range(count)])

    @classmethod
    def load_from_path(cls, path: str | PathLike[str]) -> "SkillTreeCatalog":
        return cls.load_from_bytes(Path(path).read_bytes())


def _read_node(reader: BinaryReader, node_id: int) -> SkillNode:
    def texts() -> list[str]:
        return [reader.read_string() for _ in range(LANGUAGE_COUNT)]

    name = reader.read_string()
    titles = texts()
    descriptions = texts()
    base_descriptions = texts()
    node_type = reader.read_i32()
    value = reader.read_i32()
    cost = reader.read_i32()
    parents = (reader.read_i32(), reader.read_i32())
    loc_x = reader.read_f32()
    loc_y = reader.read_f32()
    return SkillNode(
        id=node_id,
        name=name,
        titles=titles,
        descriptions=descriptions,
        base_descriptions=base_descriptions,
        node_type=node_type,
        value=value,
        cost=cost,
        parents=parents,
        loc_x=loc_x,
        loc_y=loc_y,
    )