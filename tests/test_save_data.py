import hashlib
import struct

import pytest

from sas2parser.binio import HashMismatchError, InvalidDataError, SaveError, xor_data
from sas2parser.save.bestiary import Bestiary, BestiaryBeast
from sas2parser.save.equipment import Equipment
from sas2parser.save.flags import PlayerFlags
from sas2parser.save.item import Item
from sas2parser.save.save_data import SaveData
from sas2parser.save.stats import Stats


def _sample(version, items=None):
    tree = [0] * 500
    tree[3] = 1
    tree[499] = 2
    stats = Stats(
        level=12,
        stats=list(range(1, 10)),
        xp=123456789012,
        silver=500,
        dropped_xp=42,
        dropped_xp_area=3,
        dropped_xp_vec=(1.5, -2.0),
        time_played=3600.25,
        hazeburnt=True,
        item_class=[1] * 40,
        tree_unlocks=tree,
        class_unlocks=[0, 1, 2],
    )
    if items is None:
        items = [Item(loot_idx=3, count=2, upgrade=1, stock_piled=True)]
    equipment = Equipment(inventory_items=items, equipped_items=[0] + [-1] * 30)
    flags = PlayerFlags(
        flags=["$&ng_2", "dawnlight_saved"], bounty_seed=77, bounties_complete=4, ng_level=2
    )
    bestiary = Bestiary([BestiaryBeast(5, 1, [True, False, False, True, False])])
    return SaveData(
        version=version,
        name="Wanderer",
        stats=stats,
        equipment=equipment,
        flags=flags,
        bestiary=bestiary,
        cosmetics=list(range(11)),
    )


@pytest.mark.parametrize("version", [17, 18, 19, 20, 117, 118, 120])
def test_round_trip_preserves_fields(version):
    original = _sample(version)
    loaded = SaveData.from_bytes(original.to_bytes())
    assert loaded.version == version
    assert loaded.name == original.name
    assert loaded.stats == original.stats
    assert loaded.equipment == original.equipment
    assert loaded.flags == original.flags
    assert loaded.bestiary == original.bestiary
    assert loaded.cosmetics == original.cosmetics


@pytest.mark.parametrize("version", [17, 19, 20, 118, 120])
def test_reserialising_loaded_save_is_identical(version):
    raw = _sample(version).to_bytes()
    assert SaveData.from_bytes(raw).to_bytes() == raw


def test_version_header_is_little_endian():
    raw = _sample(19).to_bytes()
    assert raw[:4] == struct.pack("<i", 19)


def test_v19_payload_is_xored_and_hashed():
    raw = _sample(19).to_bytes()
    payload = xor_data(raw[4:-16], 19)
    assert hashlib.md5(payload).digest() == raw[-16:]
    assert SaveData.from_bytes(raw).hash_data == raw[-16:]


def test_mod_save_uses_xor_key_19():
    raw = _sample(120).to_bytes()
    payload = xor_data(raw[4:-16], 19)
    name = b"Wanderer"
    assert payload[0] == len(name)
    assert payload[1 : 1 + len(name)] == name


def test_v17_is_plain_and_unhashed():
    raw = _sample(17).to_bytes()
    name = b"Wanderer"
    assert raw[4] == len(name)
    assert raw[5 : 5 + len(name)] == name
    assert SaveData.from_bytes(raw).hash_data is None


def test_legacy_vanilla_padding_is_forty_bytes():
    vanilla = _sample(17).to_bytes()
    modded = _sample(117).to_bytes()
    assert len(vanilla) - len(modded) == 40


def test_mod_item_fields_round_trip():
    items = [Item(1, 1, 0, False, artifact_seed=7, item_version=2, rarity=3)]
    loaded = SaveData.from_bytes(_sample(120, items).to_bytes())
    assert loaded.equipment.inventory_items == items


def test_to_vanilla_bytes_drops_mod_fields():
    items = [Item(1, 1, 0, False, artifact_seed=7, item_version=2, rarity=3)]
    modded = SaveData.from_bytes(_sample(120, items).to_bytes())
    vanilla = SaveData.from_bytes(modded.to_vanilla_bytes(19))
    assert vanilla.version == 19
    assert vanilla.equipment.inventory_items == [Item(1, 1, 0, False)]
    assert vanilla.name == modded.name


def test_to_vanilla_bytes_rejects_mod_version():
    with pytest.raises(InvalidDataError):
        _sample(19).to_vanilla_bytes(101)


def test_tampered_hash_is_rejected():
    raw = bytearray(_sample(19).to_bytes())
    raw[-1] ^= 0xFF
    with pytest.raises(HashMismatchError):
        SaveData.from_bytes(bytes(raw))


def test_custom_hash_override_is_written_verbatim():
    save = _sample(19)
    save.custom_hash_override = b"\x01" * 16
    raw = save.to_bytes()
    assert raw[-16:] == b"\x01" * 16
    with pytest.raises(HashMismatchError):
        SaveData.from_bytes(raw)


def test_trailing_bytes_are_rejected():
    raw = _sample(17).to_bytes() + b"\x00"
    with pytest.raises(InvalidDataError):
        SaveData.from_bytes(raw)


def test_truncated_payload_is_rejected():
    raw = _sample(17).to_bytes()[:-5]
    with pytest.raises(SaveError):
        SaveData.from_bytes(raw)


def test_data_shorter_than_hash_is_rejected():
    with pytest.raises(InvalidDataError):
        SaveData.from_bytes(struct.pack("<i", 19) + b"\x00" * 3)


def test_missing_version_is_rejected():
    with pytest.raises(SaveError):
        SaveData.from_bytes(b"\x13\x00")