import pytest

from sas2parser.binio import BinaryReader, BinaryWriter, SaveError
from sas2parser.save.stats import Stats


def _encode(stats):
    writer = BinaryWriter()
    stats.write(writer, 19)
    return writer.getvalue()


def _sample():
    return Stats(
        level=42,
        stats=list(range(1, 10)),
        xp=2**40,
        silver=123456789,
        dropped_xp=-7,
        dropped_xp_area=3,
        dropped_xp_vec=(1.5, -2.25),
        time_played=3600.5,
        hazeburnt=True,
        item_class=[i % 4 for i in range(40)],
        tree_unlocks=[i % 2 for i in range(500)],
        class_unlocks=[1, 0, 1],
    )


def test_round_trip():
    stats = _sample()
    data = _encode(stats)
    reader = BinaryReader(data)
    assert Stats.read(reader, 19) == stats
    assert reader.position() == len(data)


def test_encoded_size_is_fixed():
    assert len(_encode(_sample())) == len(_encode(Stats())) == 2257


def test_default_round_trip():
    stats = Stats()
    assert Stats.read(BinaryReader(_encode(stats)), 18) == stats


def test_truncated_raises():
    with pytest.raises(SaveError):
        Stats.read(BinaryReader(_encode(Stats())[:-4]), 19)


def test_wrong_table_length_rejected():
    with pytest.raises(ValueError):
        Stats(tree_unlocks=[0] * 10).write(BinaryWriter(), 19)