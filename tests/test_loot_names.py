import pytest

from sas2parser.loot_names import (
    get_field_name,
    get_flag_name,
    get_loot_flag_count,
    get_magic_type_name,
    get_subtype_name,
    get_type_name,
    is_magic_slot_field,
)

ALL_TYPES = range(9)


def test_type_names():
    assert get_type_name(0) == "Armor"
    assert get_type_name(1) == "Weapon"
    assert get_type_name(8) == "Gesture"
    assert get_type_name(9) == "Unknown"
    assert get_type_name(-1) == "Unknown"


def test_subtype_names():
    assert get_subtype_name(0, 3) == "Boots"
    assert get_subtype_name(1, 0) == "Sword and Shield"
    assert get_subtype_name(1, 22) == "Chain Blade"
    assert get_subtype_name(1, 23) == "Unknown"
    assert get_subtype_name(2, 7) == "Channeling Rod"
    assert get_subtype_name(6, 6) == "Trophy"
    assert get_subtype_name(6, -1) == "Unknown"


@pytest.mark.parametrize(
    "type_, expected", [(4, "Material"), (5, "Key"), (7, "Magic"), (8, "Gesture")]
)
def test_subtype_fixed_for_types_without_subtypes(type_, expected):
    assert {get_subtype_name(type_, s) for s in (-5, 0, 3, 100)} == {expected}


def test_subtype_unknown_type():
    assert get_subtype_name(42, 0) == "Unknown"


@pytest.mark.parametrize("type_", ALL_TYPES)
def test_flag_count_matches_defined_flags(type_):
    count = get_loot_flag_count(type_)
    names = [get_flag_name(type_, i) for i in range(count)]
    assert "Unknown Flag" not in names
    assert get_flag_name(type_, count) == "Unknown Flag"


def test_flag_count_unknown_type_is_zero():
    assert get_loot_flag_count(9) == 0
    assert get_loot_flag_count(-3) == 0


def test_magic_slot_fields():
    assert [f for f in range(40) if is_magic_slot_field(1, f)] == [14, 15, 16]
    assert not any(is_magic_slot_field(t, 15) for t in ALL_TYPES if t != 1)


def test_magic_slot_fields_are_named_magic():
    assert get_field_name(1, 14) == "Magic [X]"
    assert get_field_name(1, 15) == "Magic [Y]"
    assert get_field_name(1, 16) == "Magic [B]"


def test_magic_type_names():
    assert get_magic_type_name(0) == "Amp"
    assert get_magic_type_name(12) == "Seekers"
    assert get_magic_type_name(13) == "Unknown Magic"
    assert get_magic_type_name(-1) == "Unknown Magic"


def test_field_names():
    assert get_field_name(0, 17) == "Heavy"
    assert get_field_name(0, 18) == "Unknown Field"
    assert get_field_name(1, 35) == "Magic 3 Cooldown"
    assert get_field_name(2, 20) == "Class Level"
    assert get_field_name(4, 2) == "Inventory Max"
    assert get_field_name(7, 3) == "Cooldown"
    assert get_field_name(8, 0) == "Animation"
    assert get_field_name(8, 1) == "Unknown Field"


def test_consumable_expansion_fields():
    assert get_field_name(3, 6) == "Expand 1/Loot 1"
    assert get_field_name(3, 7) == "- Count"
    assert get_field_name(3, 8) == "-Loot 2"
    assert get_field_name(3, 34) == "Expand 8/Loot 1"
    assert get_field_name(3, 38) == "Max"
    assert get_field_name(3, 41) == "Ammo Per Use"
    assert get_field_name(3, 42) == "Unknown Field"


def test_weapon_and_ranged_share_base_fields():
    assert [get_field_name(1, f) for f in range(14)] == [
        get_field_name(2, f) for f in range(14)
    ]
    assert get_field_name(2, 14) == "Req Str"


def test_key_fields_are_fixed():
    assert {get_field_name(5, f) for f in (-1, 0, 7)} == {"Key"}


def test_field_unknown_type():
    assert get_field_name(99, 0) == "Unknown Field"


def test_flag_names():
    assert get_flag_name(0, 6) == "Elem|Fire"
    assert get_flag_name(0, 26) == "Elem|Dark"
    assert get_flag_name(0, 28) == "Punch Power"
    assert get_flag_name(1, 55) == "Elem|Gold"
    assert get_flag_name(2, 21) == "Full Proc"
    assert get_flag_name(3, 39) == "Salt 1"
    assert get_flag_name(3, 46) == "Salt 8"
    assert get_flag_name(3, 47) == "+Silverbag"
    assert get_flag_name(3, 89) == ">Oath Candle"
    assert get_flag_name(4, 4) == "Black Pearl"
    assert get_flag_name(6, 54) == "Haze Rage"
    assert get_flag_name(8, 3) == "Neutral"


def test_element_flags_shared_between_weapon_armor_and_ranged():
    weapon = [get_flag_name(1, i) for i in range(21)]
    assert weapon == [get_flag_name(2, i) for i in range(21)]
    assert weapon == [get_flag_name(0, i + 6) for i in range(21)]


def test_flag_unknown_inputs():
    assert get_flag_name(5, 2) == "Unknown Flag"
    assert get_flag_name(0, -1) == "Unknown Flag"
    assert get_flag_name(12, 0) == "Unknown Flag"