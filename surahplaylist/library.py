"""A collection of named playlists, with text reports and file storage."""

from __future__ import annotations

import os
from collections.abc import Iterator

from .linkedlist import DoublyLinkedList
from .playlist import Playlist
from .surah import Surah

LIST_SEPARATOR = "-" * 113
PLAYLIST_SEPARATOR = "-" * 97

_FIELDS_PER_SURAH = 4


class PlaylistLibrary:
    """All playlists, kept in the order they were added."""

    def __init__(self) -> None:
        self._playlists: DoublyLinkedList[Playlist] = DoublyLinkedList()

    def __len__(self) -> int:
        return len(self._playlists)

    def __iter__(self) -> Iterator[Playlist]:
        return iter(self._playlists)

    def __repr__(self) -> str:
        return f"PlaylistLibrary({list(self._playlists)!r})"

    def add_playlist(self, playlist: Playlist) -> None:
        """Append a playlist to the library."""
        self._playlists.append(playlist)

    def remove_playlist(self, position: int) -> Playlist:
        """Remove and return the playlist at the 1-based ``position``."""
        return self._playlists.delete_at(position)

    def get_playlist(self, name: str) -> Playlist | None:
        """The first playlist with this name, or None."""
        return next((p for p in self._playlists if p.name == name), None)

    def format_playlists(self) -> str:
        """The names of all playlists, or a notice when there are none."""
        if not self._playlists:
            return "No playlists available "
        names = [playlist.name for playlist in self._playlists]
        return "\n".join(["The current playlists are: ", LIST_SEPARATOR, *names])

    def format_all_surahs(self) -> str:
        """Every playlist followed by its table of surahs."""
        if not self._playlists:
            return "There is no  playlists "
        blocks = [
            f"Playlist:{playlist.name}\n{PLAYLIST_SEPARATOR}\n{playlist.format_surahs()}"
            for playlist in self._playlists
        ]
        return "\n".join(blocks)

    def save(self, filename: str | os.PathLike[str]) -> None:
        """Write a readable description of every playlist to ``filename``."""
        with open(filename, "w", encoding="utf-8") as file:
            for playlist in self._playlists:
                file.write(f"The name of the playlist is {playlist.name}\n")
                for surah in playlist.surahs:
                    file.write(f"Surah name :{surah.name}\n")
                    file.write(f"Reciter: {surah.reciter}\n")
                    file.write(f"Type: {surah.type}\n")
                    file.write(f"Path: {surah.path}\n")

    def load(self, filename: str | os.PathLike[str]) -> Playlist | None:
        """Read one playlist from whitespace-separated words and add it.

        The first word names the playlist; each following group of four words
        is a surah's name, reciter, type and path. An incomplete last group is
        dropped. Returns the playlist added, or None for an empty file.
        """
        with open(filename, encoding="utf-8") as file:
            words = file.read().split()
        if not words:
            return None
        playlist = Playlist(words[0])
        fields = iter(words[1:])
        for name, reciter, kind, path in zip(*[fields] * _FIELDS_PER_SURAH):
            playlist.add_surah(Surah(name, reciter, kind, path))
        self._playlists.append(playlist)
        return playlist