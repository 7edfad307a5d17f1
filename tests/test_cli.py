import io

import pytest

from surahplaylist.cli import main, run


class FakePlayer:
    def __init__(self):
        self.played = []
        self.stops = 0

    def play(self, path):
        self.played.append(path)

    def stop(self):
        self.stops += 1


def _run(text, player=None):
    output = []
    library = run(io.StringIO(text), output.append, player)
    return library, output


def test_add_playlist_and_exit():
    library, output = _run("1 fav 12\n")
    assert [p.name for p in library] == ["fav"]
    assert output[-1] == "Enter your choice: "


def test_end_of_input_stops_loop():
    library, _ = _run("1 fav\n1")
    assert [p.name for p in library] == ["fav"]


def test_choice_out_of_range():
    _, output = _run("13 abc 12")
    assert output.count("Please select a number between 1 and 12.") == 2


def test_add_surah_to_playlist():
    library, _ = _run("1 fav\n2 fav Fatiha Afasy mp3 a.wav\n12\n")
    surahs = list(library.get_playlist("fav").surahs)
    assert [(s.name, s.reciter, s.type, s.path) for s in surahs] == [
        ("Fatiha", "Afasy", "mp3", "a.wav")
    ]


def test_add_surah_missing_playlist():
    library, output = _run("2 nope 12")
    assert "There is no playlist with that name. " in output
    assert len(library) == 0


def test_remove_surah():
    library, _ = _run("1 p 2 p A r t a.wav 2 p B r t b.wav 3 p 1 12")
    assert [s.name for s in library.get_playlist("p").surahs] == ["B"]


def test_remove_surah_bad_position():
    library, output = _run("1 p 2 p A r t a.wav 3 p 4 12")
    assert "Out of boundary" in output
    assert len(library.get_playlist("p").surahs) == 1


def test_option_four_shows_playlists():
    _, output = _run("1 fav 4 12")
    assert any(line.endswith("fav") and "The current playlists are: " in line for line in output)


def test_display_all_surahs_empty():
    _, output = _run("6 12")
    assert "There is no  playlists " in output


def test_display_specific_playlist():
    _, output = _run("1 p 7 p 12")
    assert any("There is no surahs " in line for line in output)


def test_playback_navigates_and_stops():
    player = FakePlayer()
    _, output = _run(
        "1 p 2 p Fatiha Afasy mp3 a.wav 2 p Baqara Afasy mp3 b.wav\n8 p right esc\n12\n",
        player,
    )
    assert player.played == ["a.wav", "b.wav"]
    assert "The Surah stopped playing." in output


def test_playback_empty_playlist():
    player = FakePlayer()
    _, output = _run("1 p 8 p 12", player)
    assert "No surahs to play " in output
    assert player.played == []


def test_remove_playlist_positions():
    library, output = _run("1 a 1 b 11 0 11 5 11 1 12")
    assert "Invalid position" in output
    assert "Out of boundary" in output
    assert [p.name for p in library] == ["b"]


def test_remove_playlist_from_empty():
    _, output = _run("11 1 12")
    assert "List is empty" in output


def test_save_and_load(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    _, output = _run("1 fav 2 fav Fatiha Afasy mp3 a.wav 9 out.txt 12")
    assert "Playlists saved successfully." in output
    assert (tmp_path / "out.txt").read_text(encoding="utf-8").startswith(
        "The name of the playlist is fav\n"
    )
    (tmp_path / "in.txt").write_text("night Mulk Husary wav m.wav", encoding="utf-8")
    library, output = _run("10 in.txt 12")
    assert "The file is opened. " in output
    assert [s.path for s in library.get_playlist("night").surahs] == ["m.wav"]


def test_load_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    library, output = _run("10 missing.txt 12")
    assert "File is not opened missing.txt" in output
    assert len(library) == 0


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 fav 5 12\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "The current playlists are: " in out
    assert "fav" in out


def test_main_rejects_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])