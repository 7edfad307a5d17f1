"""Interactive menu for managing and playing surah playlists."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator

from .library import LIST_SEPARATOR, PlaylistLibrary
from .linkedlist import EmptyListError
from .playlist import Key, Playlist
from .surah import Surah

MENU = "\n".join(
    [
        LIST_SEPARATOR,
        "1.Add a new playlist ",
        "2.Add surah to an existing playlist ",
        "3.Remove surah to an existing playlist ",
        "4.Update the order of existing playlist ",
        "5.Display all current playlists ",
        "6.Display all playlist's surahs ",
        "7.Display surah from specific playlist ",
        "8.Play surahs from specific playlist ",
        "Use left arrow(<-) to play the previous surah",
        "Use right arrow(->) to play the next surah",
        "Use the up arrow(^) to pause the current surah",
        "Use the down arrow(v) to resume the current surah",
        "Press esc to stop the surah ",
        "9.Save the playlist to an existing file ",
        "10.Load an existing playlist to a file ",
        "11.Remove an existing playlist ",
        "12.Exit",
        LIST_SEPARATOR,
    ]
)

_KEY_NAMES = {
    "left": Key.LEFT,
    "<-": Key.LEFT,
    "right": Key.RIGHT,
    "->": Key.RIGHT,
    "up": Key.PAUSE,
    "^": Key.PAUSE,
    "down": Key.RESUME,
    "v": Key.RESUME,
    "esc": Key.ESCAPE,
}

_EXIT = 12
_NO_PLAYLIST = "There is no playlist with that name. "


class _EndOfInput(Exception):
    """The input ran out in the middle of a command."""


def _words(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _parse_key(word: str) -> int:
    key = _KEY_NAMES.get(word.lower())
    if key is not None:
        return int(key)
    try:
        return int(word)
    except ValueError:
        return 0


class _Console:
    def __init__(self, lines, write, player) -> None:
        self.library = PlaylistLibrary()
        self._words = _words(lines)
        self._write = write
        self._player = player

    def read(self, prompt: str) -> str:
        self._write(prompt)
        word = next(self._words, None)
        if word is None:
            raise _EndOfInput
        return word

    def read_int(self, prompt: str) -> int | None:
        word = self.read(prompt)
        try:
            return int(word)
        except ValueError:
            self._write("Please enter a number.")
            return None

    def keys(self) -> Iterator[int]:
        for word in self._words:
            yield _parse_key(word)

    def find(self, name: str) -> Playlist | None:
        playlist = self.library.get_playlist(name)
        if playlist is None:
            self._write(_NO_PLAYLIST)
        return playlist

    def remove(self, remover: Callable[[int], object], position: int) -> None:
        try:
            remover(position)
        except EmptyListError:
            self._write("List is empty")
        except IndexError:
            self._write("Out of boundary")
        except ValueError:
            self._write("Invalid position")

    def loop(self) -> None:
        while True:
            self._write(MENU)
            choice = self._choice(self.read("Enter your choice: "))
            if choice is None:
                self._write("Please select a number between 1 and 12.")
                continue
            if choice == _EXIT:
                return
            self._commands[choice](self)

    @staticmethod
    def _choice(word: str) -> int | None:
        try:
            choice = int(word)
        except ValueError:
            return None
        return choice if 1 <= choice <= _EXIT else None

    def add_playlist(self) -> None:
        name = self.read("Enter tha name of the playlist to add: ")
        self.library.add_playlist(Playlist(name))

    def add_surah(self) -> None:
        playlist = self.find(self.read("Enter the name of the playlist to add the Surah "))
        if playlist is None:
            return
        name = self.read("Enter the name of the surah: ")
        reciter = self.read("Enter the name of the Reciter: ")
        kind = self.read(" Enter the Type : ")
        path = self.read("Enter the Path: ")
        playlist.add_surah(Surah(name, reciter, kind, path))

    def remove_surah(self) -> None:
        name = self.read("Enter the name of the playlist to remove the Surah ")
        position = self.read_int("Enter the position of the Surah in the playlist ")
        if position is None:
            return
        playlist = self.find(name)
        if playlist is not None:
            self.remove(playlist.remove_surah, position)

    def show_playlists(self) -> None:
        self._write(self.library.format_playlists())

    def show_all_surahs(self) -> None:
        self._write(self.library.format_all_surahs())

    def show_playlist(self) -> None:
        playlist = self.find(self.read("Enter the name of the playlist to display it's Surahs :"))
        if playlist is not None:
            self._write(playlist.format_surahs())

    def play(self) -> None:
        playlist = self.find(self.read("Enter the name of the playlist to play Surahs :"))
        if playlist is None:
            return
        try:
            playlist.play(self.keys(), self._player, self._write)
        except RuntimeError as exc:
            self._write(str(exc))

    def save(self) -> None:
        filename = self.read("Enter the file name : ")
        try:
            self.library.save(filename)
        except OSError:
            self._write("File is not opened.")
            return
        self._write("The file is opened. ")
        if not len(self.library):
            self._write("There is no playlists ")
        self._write("Playlists saved successfully.")

    def load(self) -> None:
        filename = self.read("Enter the file name : ")
        try:
            self.library.load(filename)
        except OSError:
            self._write(f"File is not opened {filename}")
            return
        self._write("The file is opened. ")

    def remove_playlist(self) -> None:
        position = self.read_int("Enter the position of the playlist to remove : ")
        if position is not None:
            self.remove(self.library.remove_playlist, position)

    # Option 4 has no action of its own and shows the playlists, like option 5.
    _commands = {
        1: add_playlist,
        2: add_surah,
        3: remove_surah,
        4: show_playlists,
        5: show_playlists,
        6: show_all_surahs,
        7: show_playlist,
        8: play,
        9: save,
        10: load,
        11: remove_playlist,
    }


def run(
    lines: Iterable[str],
    write: Callable[[str], object] = print,
    player=None,
) -> PlaylistLibrary:
    """Run the menu over the words of ``lines`` until exit or end of input."""
    console = _Console(lines, write, player)
    try:
        console.loop()
    except _EndOfInput:
        pass
    return console.library


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu on standard input."""
    parser = argparse.ArgumentParser(
        prog="surahplaylist", description="Manage and play playlists of surahs."
    )
    parser.parse_args(argv)
    run(sys.stdin)
    return 0