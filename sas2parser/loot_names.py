"""Display names for loot types, subtypes, fields, flags and magic kinds."""

from __future__ import annotations

from collections.abc import Sequence

UNKNOWN = "Unknown"
UNKNOWN_FIELD = "Unknown Field"
UNKNOWN_FLAG = "Unknown Flag"
UNKNOWN_MAGIC = "Unknown Magic"

WEAPON_TYPE = 1
MAGIC_SLOT_FIELDS = frozenset({14, 15, 16})


def _lookup(table: Sequence[str], idx: int, default: str) -> str:
    return table[idx] if 0 <= idx < len(table) else default


_TYPE_NAMES = (
    "Armor",
    "Weapon",
    "Ranged",
    "Consumable",
    "Material",
    "Key",
    "Charm",
    "Magic",
    "Gesture",
)

_SUBTYPES: dict[int, tuple[str, ...]] = {
    0: ("Helm", "Armor", "Gloves", "Boots"),
    1: (
        "Sword and Shield",
        "Twin Daggers",
        "Axe",
        "Spear",
        "Warhammer",
        "Glaive",
        "Greatsword",
        "Stave",
        "Zweihander",
        "Katana",
        "Rapier",
        "Whip",
        "[bound]",
        "Scythe",
        "Chainsword",
        "Greatscissor",
        "Switchblade",
        "Gunblade",
        "True Zwei",
        "Mach Vanguard",
        "Axe/Blade",
        "Spin daggers",
        "Chain Blade",
    ),
    2: (
        "Throwing Daggers",
        "Crossbow",
        "Flintlock",
        "Longbow",
        "Arbalest",
        "Rifle",
        "Throwing Axe",
        "Channeling Rod",
        "Throwable",
    ),
    3: ("Tool", "Ammunition", "Key"),
    6: (
        "Ring",
        "Amulet",
        "Dagger",
        "Artifact (Attack)",
        "Artifact (Defense)",
        "Artifact (Utility)",
        "Trophy",
    ),
}

# Types without subtypes are named after the type itself.
_FIXED_SUBTYPE = {4: "Material", 5: "Key", 7: "Magic", 8: "Gesture"}

_FLAG_COUNTS = (29, 56, 22, 90, 12, 2, 55, 2, 4)

_MAGIC_TYPE_NAMES = (
    "Amp",
    "Elem",
    "Cure",
    "Wave",
    "Orbits",
    "Turret",
    "Antidote",
    "Resistance",
    "Explosion",
    "Column",
    "Bless",
    "Orbs",
    "Seekers",
)

_CRAFTING = (
    "Crafting Loot 1",
    "- Loot 1 Count",
    "Crafting Loot 2",
    "- Loot 2 Count",
    "Crafting Loot 3",
    "- Loot 3 Count",
)

_WEAPON_BASE_FIELDS = (
    "Phys Atk",
    "Elem Percent",
    *_CRAFTING,
    "Str Scale",
    "Dex Scale",
    "Arcana Scale",
    "Luck Scale",
    "Upgrade Scale",
    "Base Upgrade",
)

_EXPANSION_FIELDS = tuple(
    name
    for tier in range(1, 9)
    for name in (f"Expand {tier}/Loot 1", "- Count", "-Loot 2", "- Count")
)

_FIELDS: dict[int, tuple[str, ...]] = {
    0: (
        "Phys Def",
        "Fire Def",
        "Cold Def",
        "Poison Def",
        "Light Def",
        "Dark Def",
        "Weight",
        "Crafting Loot 1",
        "- Loot 1 Count",
        "Crafting Loot 2",
        "- Loot 2 Count",
        "Crafting Loot 3",
        "- Loot 3 Count",
        "Poise",
        "Upgrade Scale",
        "Base Upgrade",
        "Class Level",
        "Heavy",
    ),
    1: (
        *_WEAPON_BASE_FIELDS,
        "Magic [X]",
        "Magic [Y]",
        "Magic [B]",
        "Req Str",
        "Req Dex",
        "Req Arcana",
        "Req Luck",
        "Req Conv",
        "Conv Scale",
        "Class Level",
        "Magic 1 Class",
        "Magic 2 Class",
        "Magic 3 Class",
        "Dark Glyphs",
        "Magic 1 Cost",
        "Magic 2 Cost",
        "Magic 3 Cost",
        "BlockDam(50-100)",
        "BlockStm(0-50)",
        "Magic 1 Cooldown",
        "Magic 2 Cooldown",
        "Magic 3 Cooldown",
    ),
    2: (
        *_WEAPON_BASE_FIELDS,
        "Req Str",
        "Req Dex",
        "Req Arcana",
        "Req Luck",
        "Req Conv",
        "Conv Scale",
        "Class Level",
    ),
    3: (
        "Replenishable",
        "Base Replenish Count",
        "Replenish Loot",
        "Expandable",
        "Expansion Max",
        "Expansion Count/Tier",
        *_EXPANSION_FIELDS,
        "Max",
        "Auto Minimum",
        "Uses Ammo",
        "Ammo Per Use",
    ),
    4: ("Silver Min", "Silver Max", "Inventory Max"),
    6: _CRAFTING,
    7: ("Cost", "Magic", "Class", "Cooldown"),
    8: ("Animation",),
}

# Key items have no fields; every id maps to the type name.
_FIXED_FIELD = {5: "Key"}

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
    0: (
        "Full Helm",
        "Hat Helm",
        "Headband",
        "Hood",
        "Ear Hat",
        "Heavy Armor",
        *_ELEMENTS,
        "Barefoot Skirt",
        "Punch Power",
    ),
    1: (
        *_ELEMENTS,
        "Rage",
        "MP",
        "Bludgeon Partial",
        "Bludgeon Full",
        "Bludgeon Mega",
        "Side Attach",
        "Chain Whip",
        "Elem|Mummy",
        "Elem|Ghost",
        "Elem|Red Lit",
        "Elem|Red Fire",
        "Elem|Blue Dragon",
        "Elem|Sky",
        "Elem|Messiah",
        "Elem|Owl",
        "Elem|Hag",
        "Elem|Dawnlight",
        "Elem|Blueheart",
        "Elem|Sheriff",
        "Elem|Oath",
        "Elem|Shroud",
        "Elem|Chaos",
        "+Fast Hitter",
        "-Slow Hitter",
        "+Slide",
        "+Extra Poise Dmg",
        "-Less Poise Dmg",
        "-Extra Stamina Cost",
        "+Less Stamina Cost",
        "+Long Slide",
        "+Faster Hitter",
        "-Slower Hitter",
        "-Wide Glaive",
        "Elem|Traitor",
        "Elem|Gold",
    ),
    2: (*_ELEMENTS, "Full Proc"),
    3: (
        "Health",
        "Antivenom",
        "+Drinkable",
        "+Throwable",
        "+Incense",
        "Firebomb",
        "Salt Pouch",
        "Etched Bones",
        "Hawthorn Incense",
        "Portal Stone",
        "+Artifact",
        "Rare",
        "Very Rare",
        "Legendary",
        "Ammo|Incendiary",
        "Ammo|Explosive",
        "Ammo|Poison",
        "Ammo|Cryo",
        "Ammo|Divine",
        "Ammo|Cursed",
        "Focus",
        "Tiny Heal",
        "+Edible",
        "Antitoxin",
        "Restore Revive",
        "Key Item",
        ">Host Coop",
        ">Join Coop",
        ">Shroud Invasion",
        ">Chaos Invasion",
        "+Candle",
        "+Page",
        ">Blueheart Invasion",
        "+Crushable",
        "+Alchemy",
        "Censer",
        "+Snuffer",
        "Reset QP Timer",
        "Cancel QP Search",
        *(f"Salt {n}" for n in range(1, 9)),
        "+Silverbag",
        "Silver 100",
        "Silver 500",
        "Silver 1000",
        "Chaos Gift (Good)",
        "Chaos Gift (Bad)",
        "Chaos Gift (Surprise)",
        "+Message Post",
        "+Chaos Gift",
        "Field Replenishable",
        ">Host Invasion",
        "Chameleon",
        "Sight",
        "Blind",
        "Nowshow",
        "No Sell",
        "+Stab Blade",
        "+Tar Cloth",
        "+Burner",
        "Inc Heal",
        "Inc Rage",
        "Inc Bless",
        "Inc Stamina",
        "Stab Rage",
        "Tar Fire",
        "Tar Cold",
        "Tar Poison",
        "Tar Light",
        "Tar Dark",
        "Reset roaming",
        "Inc Focus",
        "Stab Ammo",
        "+Breath",
        "Breath Necro",
        "Breath Aero",
        "Breath Draco",
        "Breath Terra",
        "Breath Kineto",
        "Stab focus",
        "PvP egg",
        "Show Mage Locs",
        ">Sheriff Candle",
        ">Oath Candle",
    ),
    4: (
        "Rare",
        "Very Rare",
        "Legendary",
        "Epic",
        "Black Pearl",
        "Gray Pearl",
        "Elem|Phys",
        "Elem|Fire",
        "Elem|Cold",
        "Elem|Poison",
        "Elem|Light",
        "Elem|Dark",
    ),
    5: ("Starting Class", "Tome"),
    6: (
        "Phys Def",
        "Fire Def",
        "Cold Def",
        "Poison Def",
        "Light Def",
        "Dark Def",
        "Item Find",
        "Rage Gain",
        "Rage Window",
        "Wood Runes",
        "Poise",
        "Fast grapple/climb",
        "Stamina Regen",
        "Silver Find",
        "Damage",
        "Gold",
        "Fire Atk",
        "Cold Atk",
        "Poison Atk",
        "Light Atk",
        "Dark Atk",
        "Multiplayer|Searching",
        "Multiplayer|Dawnlight",
        "Multiplayer|Blueheart",
        "Multiplayer|Oathbound",
        "Multiplayer|Shroud",
        "Multiplayer|Sheriff",
        "Multiplayer|Chaos",
        "Multiplayer|Shadow",
        "Carry Weight",
        "HP Kill Gain",
        "MP Kill Gain",
        "Parry Stagger Damage",
        "MP Regain",
        "Riposte Dmg",
        "Dying Boost",
        "Max HP Boost",
        "Max Rage Boost",
        "Max MP Boost",
        "Max Stamina Boost",
        "MP Parry regain",
        "HP Parry regain",
        "MP Riposte regain",
        "HP Riposte regain",
        "Restock speed",
        "Rage Parry regain",
        "Rage Riposte regain",
        "Stamina coverage",
        "Blocking stamina cheap",
        "Runic art boost",
        "Faster Drinking",
        "Overall defense",
        "Haze HP",
        "Haze MP",
        "Haze Rage",
    ),
    7: ("Rage Type", "MP Type"),
    8: ("Coop", "Friendly", "Angry", "Neutral"),
}


def get_type_name(type_: int) -> str:
    """Display name of a loot type."""
    return _lookup(_TYPE_NAMES, type_, UNKNOWN)


def get_subtype_name(type_: int, sub_type: int) -> str:
    """Display name of a subtype within a loot type."""
    if type_ in _FIXED_SUBTYPE:
        return _FIXED_SUBTYPE[type_]
    return _lookup(_SUBTYPES.get(type_, ()), sub_type, UNKNOWN)


def get_loot_flag_count(type_: int) -> int:
    """Number of flags defined for a loot type (0 for unknown types)."""
    return _FLAG_COUNTS[type_] if 0 <= type_ < len(_FLAG_COUNTS) else 0


def is_magic_slot_field(type_: int, field_id: int) -> bool:
    """Whether a field holds a weapon's magic-slot item reference."""
    return type_ == WEAPON_TYPE and field_id in MAGIC_SLOT_FIELDS


def get_magic_type_name(idx: int) -> str:
    """Display name of a magic kind."""
    return _lookup(_MAGIC_TYPE_NAMES, idx, UNKNOWN_MAGIC)


def get_field_name(type_: int, field_id: int) -> str:
    """Display name of a field of a loot type."""
    if type_ in _FIXED_FIELD:
        return _FIXED_FIELD[type_]
    return _lookup(_FIELDS.get(type_, ()), field_id, UNKNOWN_FIELD)


def get_flag_name(type_: int, flag_idx: int) -> str:
    """Display name of a flag of a loot type."""
    return _lookup(_FLAGS.get(type_, ()), flag_idx, UNKNOWN_FLAG)