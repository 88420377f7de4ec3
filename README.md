# sas2parser

A pure-Python library for reading, editing and writing Salt and Sacrifice
save files. It also parses the game's data catalogs (loot, monsters, skill
tree, character definitions, sprite sub-flags, texture metadata) and has
lookup tables that give display names for their numeric types, fields and
flags. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Save files

```python
from pathlib import Path
from sas2parser.save.save_data import SaveData
from sas2parser.save.flags import set_ng_level

save = SaveData.from_bytes(Path("save.bin").read_bytes())
print(save.name, save.stats.level, len(save.equipment.inventory_items))
print(save.flags.ng_level)

set_ng_level(save.flags, 2)   # replaces any "$&ng_<n>" flag with "$&ng_2"

Path("save.bin").write_bytes(save.to_bytes())
```

`SaveData.from_bytes` works out the layout from the version number at the
start of the file:

- versions above 100 are modded saves: the base version is the number minus
  100 and the payload is XORed with 19;
- versions 18 and 19 are XORed with their own version number;
- from base version 18 on, the payload is followed by an MD5 checksum of the
  unobfuscated payload, and a mismatch raises `HashMismatchError`;
- vanilla saves below version 19 carry ten padding integers before the
  bestiary;
- items carry three extra fields (`artifact_seed`, `item_version`, `rarity`)
  from base version 20 on.

The whole payload must be consumed; leftover or missing bytes raise
`InvalidDataError`.

`to_bytes()` writes the save with its own version. `to_vanilla_bytes(target_version)`
writes it in the layout of a vanilla version (at most 100; a larger number
raises `InvalidDataError`). Setting `custom_hash_override` to 16 bytes
writes those bytes in place of the computed checksum.

The parts of a save live in their own modules under `sas2parser.save`:
`stats.Stats`, `equipment.Equipment`, `item.Item`, `flags.PlayerFlags`
(with `update_ng_level` and `set_ng_level`) and `bestiary.Bestiary` /
`bestiary.BestiaryBeast`. Each has `read(reader, version)` and
`write(writer, version)` using the readers and writers in `sas2parser.binio`.

## Errors

All parse errors derive from `sas2parser.binio.SaveError`:
`InvalidDataError`, `HashMismatchError` and `InvalidVersionError`. Running
out of data while reading also raises `SaveError`. Writing a record whose
fixed-size lists have the wrong length raises `ValueError`.

## Game data catalogs

```python
from pathlib import Path
from sas2parser.loot_catalog import LootCatalog
from sas2parser.loot_names import get_type_name, get_subtype_name, get_flag_name
from sas2parser.monster_catalog import MonsterCatalog
from sas2parser.monster_names import get_monster_type_name
from sas2parser.skilltree import SkillTreeCatalog
from sas2parser.char_def import CharDef
from sas2parser.subflags import SubFlagDefCatalog
from sas2parser.xtexture import XTextureMeta

loot = LootCatalog.load_from_bytes(Path("loot.zls").read_bytes())
for d in loot.loot_defs:
    print(d.name, get_type_name(d.type_), get_subtype_name(d.type_, d.sub_type))
print(loot.by_name.get("black_pearl"), loot.black_starstone_index)
Path("loot.zls").write_bytes(loot.to_bytes())

monsters = MonsterCatalog.load_from_file(Path("monsters.zms"))
print(get_monster_type_name(monsters.monsters[0].type_))

tree = SkillTreeCatalog.load_from_path(Path("skilltree.zst"))
node = tree.nodes[0]
print(node.stat_name(), node.max_unlock())

hero = CharDef.load_from_path(Path("hero.zsx"))   # named after the file stem
frame = hero.idle_frame()

flag_defs = SubFlagDefCatalog.load_from_path(Path("flagdefs.zfd"))
textures = XTextureMeta.load_all_from_master_path(Path("master.zcm"), flag_defs)
```

The loot and monster catalogs can be written back with `to_bytes()`; the
other catalogs are read-only.

Diagnostic output from the loot and monster catalog parsers goes to the
`sas2parser.loot` and `sas2parser.monster` loggers at DEBUG level and can be
switched off or on with `sas2parser.binio.set_loot_logging_enabled` and
`set_monster_logging_enabled`.

## Cosmetics

`sas2parser.cosmetics` holds the character-creation tables: `AncestryCatalog`,
`BeardCatalog`, `ClassCatalog`, `ColorCatalog`, `CrimeCatalog`, `EyeCatalog`,
`HairCatalog` and `SexCatalog`. Each has `all()`, `count()` and `name(idx)`
(which returns `None` for an index out of range).

```python
from sas2parser.cosmetics import HairCatalog, ColorCatalog

HairCatalog.name(3)            # "Bun"
HairCatalog.ordered_indices()  # indices sorted by name
ColorCatalog.all()[0].burnt_r  # hazeburnt tint of the first colour
```

## What it does not do

- There is no helper for the player's faction. Faction membership is stored
  as ordinary story flags (such as `dawnlight_saved`) and has to be read or
  changed directly in `save.flags.flags`.
- It does not read or export XNB content files (textures, fonts, sounds).
- It has no command-line tool or editor interface; it is a library only.