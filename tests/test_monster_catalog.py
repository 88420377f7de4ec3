import struct

import pytest

from sas2parser.binio import BinaryReader, BinaryWriter, InvalidDataError, SaveError
from sas2parser.monster_catalog import MonsterCatalog, MonsterDef, MonsterField


def _monster(name, **kwargs):
    defaults = dict(
        titles=[f"{name} title {i}" for i in range(20)],
        descriptions=[f"{name} desc {i}" for i in range(20)],
        type_=1,
        sub_type=3,
        cost=2.5,
        img=7,
        alt_img=-1,
        texture="monsters",
        def_="goblin_def",
        box_width=40,
        box_height=80,
        box_sub_height=10,
        shadow_width=30,
        shadow_height=6,
        fields=[
            MonsterField(0, 0, 1.5),
            MonsterField(1, 1, "wolf"),
            MonsterField(2, 2, 42),
            MonsterField(67, 13, -3),
        ],
        flags=[0, 5, 77],
    )
    defaults.update(kwargs)
    return MonsterDef(name, **defaults)


def _field_bytes(field_obj):
    writer = BinaryWriter()
    field_obj.write(writer)
    return writer.getvalue()


def test_int_field_wire_bytes():
    assert _field_bytes(MonsterField(5, 2, 7)) == struct.pack("<iii", 5, 2, 7)


def test_float_field_wire_bytes():
    assert _field_bytes(MonsterField(1, 0, 1.5)) == struct.pack("<iif", 1, 0, 1.5)


def test_string_field_wire_bytes():
    assert _field_bytes(MonsterField(3, 12, "ab")) == struct.pack("<ii", 3, 12) + b"\x02ab"


@pytest.mark.parametrize(
    "field_obj",
    [
        MonsterField(0, 0, 0.25),
        MonsterField(1, 3, "text"),
        MonsterField(2, 4, ""),
        MonsterField(9, 8, 123456),
        MonsterField(10, 11, -1),
    ],
)
def test_field_round_trip(field_obj):
    assert MonsterField.read(BinaryReader(_field_bytes(field_obj))) == field_obj


@pytest.mark.parametrize("data_type", [14, -1, 100])
def test_unknown_field_type_raises(data_type):
    with pytest.raises(InvalidDataError):
        MonsterField.read(BinaryReader(struct.pack("<iii", 0, data_type, 0)))


def test_def_round_trip():
    monster = _monster("goblin")
    reader = BinaryReader(monster.to_bytes())
    assert MonsterDef.read(reader) == monster
    assert reader.position() == len(monster.to_bytes())


def test_def_starts_with_name():
    assert _monster("goblin").to_bytes().startswith(b"\x06goblin")


def test_def_write_requires_twenty_titles():
    with pytest.raises(ValueError):
        _monster("bad", titles=["x"]).to_bytes()


def test_catalog_round_trip_and_index():
    catalog = MonsterCatalog([_monster("goblin"), _monster("troll", fields=[], flags=[])])
    data = catalog.to_bytes()
    loaded = MonsterCatalog.load_from_bytes(data)
    assert loaded.monsters == catalog.monsters
    assert loaded.by_name == {"goblin": 0, "troll": 1}
    assert loaded.to_bytes() == data


def test_catalog_count_prefix():
    catalog = MonsterCatalog([_monster("a"), _monster("b"), _monster("c")])
    assert catalog.to_bytes()[:4] == struct.pack("<i", 3)


def test_empty_catalog():
    loaded = MonsterCatalog.load_from_bytes(struct.pack("<i", 0))
    assert loaded.monsters == []
    assert loaded.by_name == {}


def test_duplicate_names_index_last():
    catalog = MonsterCatalog([_monster("dup"), _monster("dup", img=9)])
    loaded = MonsterCatalog.load_from_bytes(catalog.to_bytes())
    assert loaded.by_name["dup"] == 1


def test_truncated_catalog_raises():
    data = MonsterCatalog([_monster("goblin")]).to_bytes()
    with pytest.raises(SaveError):
        MonsterCatalog.load_from_bytes(data[:-2])


def test_negative_count_raises():
    with pytest.raises(InvalidDataError):
        MonsterCatalog.load_from_bytes(struct.pack("<i", -1))


def test_load_from_file(tmp_path):
    catalog = MonsterCatalog([_monster("bat")])
    path = tmp_path / "monsters.zmx"
    path.write_bytes(catalog.to_bytes())
    loaded = MonsterCatalog.load_from_file(path)
    assert loaded.monsters[0].name == "bat"
    assert loaded.monsters[0].fields == catalog.monsters[0].fields