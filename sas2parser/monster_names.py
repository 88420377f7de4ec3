"""Display names for monster types, fields and flags."""

from __future__ import annotations

from collections.abc import Sequence

UNKNOWN = "Unknown"
UNKNOWN_FIELD = "Unknown Field"
UNKNOWN_FLAG = "Unknown Flag"


def _lookup(table: Sequence[str], idx: int, default: str) -> str:
    return table[idx] if 0 <= idx < len(table) else default


_TYPE_NAMES = ("NPC", "Monster", "Chest", "Switch", "Trap", "Harvest", "Critter", "Travel")

_FLAG_COUNTS = (3, 78, 0, 8, 7, 3, 11, 2)

_LOOT_FIELDS = tuple(
    name
    for n in range(1, 6)
    for name in (f"Loot {n} Type", f"Loot {n} Prob", f"Loot {n} Count")
)

_ATTACK_RANGES = tuple(
    f"-{kind} {part}:"
    for kind in ("Attack", "Strong", "Special")
    for part in ("Min", "Max", "Vert", "Cooldown")
)

_FIELDS: dict[int, tuple[str, ...]] = {
    0: (
        "Armor",
        "Helm",
        "Boots",
        "Gloves",
        "Sex",
        "Ancestry",
        "Eye Color",
        "Hair",
        "Hair Color",
        "Beard",
        "Beard Color",
        "Eyebrow Color",
        "Boss Form",
    ),
    1: (
        "HP",
        "Attack Power",
        "Phys Def",
        "Fire Def",
        "Cold Def",
        "Poison Def",
        "Light Def",
        "Dark Def",
        "AI",
        "Run speed",
        "Anim|Idle",
        "Anim|Runstart",
        "Anim|Runend",
        "Anim|Run",
        "Anim|Attack",
        "Anim|Strong",
        "Anim|Special",
        "Stamina",
        "Vox Jab",
        "Vox Fierce",
        "Vox Hit",
        "Vox Die",
        "Vox Laugh",
        "Vox Scream",
        "Vox Growl",
        "Phase Thresh",
        "Craze Thresh",
        *_ATTACK_RANGES,
        "Poise",
        "Snd Step",
        "Poise Atk",
        "Hover Speed",
        "Hover Accel",
        "Summoner",
        *_LOOT_FIELDS,
        "Shield Time",
        "Shield Cooldown",
        "XP:",
        "Area:",
        "Riposte Dist",
        "Dodge Cooldown",
        "Dodge Window",
        "Linked Monster",
    ),
    3: ("Req Mage Kills",),
    4: ("Attack Power", "Poise Atk"),
    5: (*_LOOT_FIELDS, "Associated Monster"),
    6: ("Snd Step", "Boss Form"),
}

_ELEMENTS = tuple(
    f"Elem|{name}"
    for name in (
        "Fire",
        "Water",
        "Lit",
        "Poison",
        "Earth",
        "Time",
        "Flesh",
        "Fungus",
        "Mech",
        "Demon",
        "Dragon",
        "Books",
        "Air",
        "Ice",
        "Force",
        "Divine",
        "Light",
        "Blood",
        "Undead",
        "Mind",
        "Dark",
    )
)

_FLAGS: dict[int, tuple[str, ...]] = {
    0: ("Intro Guard", "Hazeburnt", "No Turn"),
    1: (
        "Mage",
        "Mob",
        "Minion",
        "Hover",
        "Giant",
        *_ELEMENTS,
        "Elite Minion",
        "Special Minion",
        "Can Leap",
        "Can Warp",
        "Hazeburnt",
        "Refract Wraith",
        "Elem|Red Lit",
        "Elem|Red Fire",
        "Boss",
        "Elem|Mummy",
        "Undead",
        "Elem|Hag",
        "Shadow",
        "Prism",
        "Treeheart",
        "Treeghost",
        "Elem|Ghost",
        "Mimic",
        "Elem|Blue Dragon",
        "Symbiotic Boss",
        "Elem|Sky",
        "Devourable",
        "Elem|Messiah",
        "Phantom Rect",
        "Elem|Owl",
        "Elem|Sky/Lit",
        "Beam Buff",
        "Long Death",
        "Elem|Heart",
        "Elem|Protect",
        "Can Grapple Atk",
        "Elem|Sheriff",
        "Elem|Oath",
        "Elem|Shroud",
        "Elem|Hunger",
        "Elem|Blueheart",
        "Elem|Dawnlight",
        "Facing Invis",
        "Dummy",
        "Minimal Height",
        "Can Fall Off",
        "Elem|Healpot",
        "No Boss Col",
        "Mask Arms",
        "Mask 1",
        "Mask 2",
        "Mask 3",
        "Mask 4",
        "Elem|Traitor",
        "Die Tier Big",
        "Smooth Hover Rope",
        "Elem|Gold",
    ),
    3: (
        "Checkpoint",
        "Give Item",
        "Stone Circle",
        "Fire Door",
        "Sky Door",
        "Arena Check",
        "Main Check",
        "Arena Check Return",
    ),
    4: (
        "Tripwire",
        "Fixed Pos",
        "Fungal",
        "Mechano",
        "Stone Circle",
        "Friendly to Monsters",
        "Mask Lasers",
    ),
    5: ("Hazeburnt", "Mage Clue", "Side Clue"),
    6: (
        "Can Pet",
        "Flies Away",
        "Wretch",
        "Talking Tree",
        "Hazeburnt",
        "Divine Tree",
        "Watcher",
        "Hover",
        "No Turn",
        "Ambient",
        "Candelabra",
    ),
    7: ("Start Point", "End Point"),
}


def get_monster_flag_count(type_: int) -> int:
    """Number of flags defined for a monster type (0 for unknown types)."""
    return _FLAG_COUNTS[type_] if 0 <= type_ < len(_FLAG_COUNTS) else 0


def get_monster_type_name(type_: int) -> str:
    """Display name of a monster type."""
    return _lookup(_TYPE_NAMES, type_, UNKNOWN)


def get_monster_field_name(monster_type: int, field_id: int) -> str:
    """Display name of a field of a monster type."""
    return _lookup(_FIELDS.get(monster_type, ()), field_id, UNKNOWN_FIELD)


def get_monster_flag_name(monster_type: int, flag_idx: int) -> str:
    """Display name of a flag of a monster type."""
    return _lookup(_FLAGS.get(monster_type, ()), flag_idx, UNKNOWN_FLAG)