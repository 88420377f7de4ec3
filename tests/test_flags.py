import pytest

from sas2parser.binio import BinaryReader, BinaryWriter, InvalidDataError
from sas2parser.save.flags import PlayerFlags, set_ng_level, update_ng_level


def _round_trip(flags):
    writer = BinaryWriter()
    flags.write(writer, 19)
    return PlayerFlags.read(BinaryReader(writer.getvalue()), 19)


def test_round_trip_derives_ng_level():
    original = PlayerFlags(["$&ng_2", "intro_done", "$&ng_5"], 77, 3)
    parsed = _round_trip(original)
    assert parsed.flags == original.flags
    assert parsed.bounty_seed == 77
    assert parsed.bounties_complete == 3
    assert parsed.ng_level == 5


def test_no_ng_flags_means_zero():
    flags = PlayerFlags(["intro_done"], ng_level=9)
    update_ng_level(flags)
    assert flags.ng_level == 0


@pytest.mark.parametrize("bad", ["$&ng_x", "$&ng_ 3", "$&ng_", "$&ng_1_0", "$&ng_99999999999"])
def test_unparsable_suffixes_ignored(bad):
    flags = PlayerFlags([bad])
    update_ng_level(flags)
    assert flags.ng_level == 0


def test_signed_suffix_parsed():
    flags = PlayerFlags(["$&ng_+4"])
    update_ng_level(flags)
    assert flags.ng_level == 4


def test_set_ng_level_replaces_flags():
    flags = PlayerFlags(["a", "$&ng_2", "b", "$&ng_7"])
    set_ng_level(flags, 3)
    assert flags.flags == ["a", "b", "$&ng_3"]
    assert flags.ng_level == 3


def test_set_ng_level_zero_removes_flag():
    flags = PlayerFlags(["$&ng_4", "keep"])
    set_ng_level(flags, 0)
    assert flags.flags == ["keep"]
    assert flags.ng_level == 0


@pytest.mark.parametrize("count", [-1, 10_001])
def test_invalid_flag_count(count):
    writer = BinaryWriter()
    writer.write_i32(count)
    with pytest.raises(InvalidDataError, match="Invalid flag count"):
        PlayerFlags.read(BinaryReader(writer.getvalue()), 19)