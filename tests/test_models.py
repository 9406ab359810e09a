import dataclasses

import pytest

from cifra.models import ChordLine, ChordPosition, ImportResult, InterchangeSong, LyricLine, Song


def test_song_defaults():
    song = Song(id="song-1", title="Grace", content="G\nla")
    assert song.artist is None
    assert song.key is None
    assert song.created_at == 0
    assert song.updated_at == 0


def test_song_to_record():
    song = Song(id="song-1", title="Grace", content="G\nla", artist="Newton", key="G",
                created_at=10, updated_at=20)
    assert song.to_record() == {
        "id": "song-1",
        "title": "Grace",
        "artist": "Newton",
        "key": "G",
        "content": "G\nla",
        "createdAt": 10,
        "updatedAt": 20,
    }


def test_song_to_record_omits_empty_optionals():
    record = Song(id="song-1", title="Grace", content="la").to_record()
    assert "artist" not in record
    assert "key" not in record


def test_song_from_record_round_trip():
    song = Song(id="song-1", title="Grace", content="la", artist="Newton", key="G",
                created_at=10, updated_at=20)
    assert Song.from_record(song.to_record()) == song


def test_song_from_record_minimal():
    song = Song.from_record({"id": 7, "title": "Grace", "content": "la"})
    assert song.id == "7"
    assert song.artist is None
    assert song.created_at == 0


def test_song_from_record_missing_content():
    with pytest.raises(KeyError):
        Song.from_record({"id": "x", "title": "Grace"})


def test_interchange_song_defaults():
    song = InterchangeSong()
    assert song.title == ""
    assert song.artist is None
    assert song.key is None
    assert song.body == ""


def test_parsed_lines_are_immutable():
    line = ChordLine("G", (ChordPosition("G", 0),))
    with pytest.raises(dataclasses.FrozenInstanceError):
        line.text = "D"


def test_parsed_line_variants_compare_by_value():
    assert LyricLine("la") == LyricLine("la")
    assert LyricLine("G") != ChordLine("G")


def test_import_result_defaults():
    result = ImportResult()
    assert (result.imported, result.failed, result.skipped) == (0, 0, 0)
    assert result.songs == []
