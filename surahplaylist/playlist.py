"""Named playlists of surahs and keyboard-driven playback."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import IntEnum
from typing import Protocol

from .linkedlist import DoublyLinkedList, EmptyListError
from .surah import COLUMN_WIDTH, Surah

SEPARATOR = "-" * 88


class Key(IntEnum):
    """Key codes that control playback."""

    ESCAPE = 27
    LEFT = 75
    RIGHT = 77
    PAUSE = 94
    RESUME = 118


class _Player(Protocol):
    def play(self, path: str) -> None: ...

    def stop(self) -> None: ...


class _WinsoundPlayer:
    """Plays WAV files asynchronously through the Windows sound API."""

    def __init__(self, module) -> None:
        self._winsound = module

    def play(self, path: str) -> None:
        flags = self._winsound.SND_FILENAME | self._winsound.SND_ASYNC
        self._winsound.PlaySound(path, flags)

    def stop(self) -> None:
        self._winsound.PlaySound(None, 0)


def default_player() -> _WinsoundPlayer:
    """Return the system audio player; raises RuntimeError where there is none."""
    try:
        import winsound
    except ImportError as exc:
        raise RuntimeError("no audio backend is available on this platform") from exc
    return _WinsoundPlayer(winsound)


class Playlist:
    """A named, ordered collection of surahs."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._surahs: DoublyLinkedList[Surah] = DoublyLinkedList()

    def __repr__(self) -> str:
        return f"Playlist({self.name!r}, {list(self._surahs)!r})"

    @property
    def surahs(self) -> DoublyLinkedList[Surah]:
        """The surahs in playing order."""
        return self._surahs

    def add_surah(self, surah: Surah) -> None:
        """Append a surah to the end of the playlist."""
        self._surahs.append(surah)

    def remove_surah(self, position: int) -> Surah:
        """Remove and return the surah at the 1-based ``position``."""
        return self._surahs.delete_at(position)

    def format_surahs(self) -> str:
        """A table of the surahs, or a notice when there are none."""
        if not self._surahs:
            return f"There is no surahs \n{SEPARATOR}"
        header = (
            f"Name {'Reciter':>{COLUMN_WIDTH}}"
            f"{'Type':>{COLUMN_WIDTH}}{'Path':>{COLUMN_WIDTH}}"
        )
        rows = [surah.format_row() for surah in self._surahs]
        return "\n".join([header, SEPARATOR, *rows])

    def play(
        self,
        keys: Iterable[int],
        player: _Player | None = None,
        write: Callable[[str], object] = print,
    ) -> None:
        """Play the surahs, steered by ``keys``; playback stops on escape or when keys run out."""
        if not self._surahs:
            write("No surahs to play ")
            return
        if player is None:
            player = default_player()
        session = PlaybackSession(self, player, write)
        session.start()
        for key in keys:
            if not session.handle_key(key):
                return
        player.stop()


class PlaybackSession:
    """State of playback through one playlist: current surah, paused or playing."""

    def __init__(
        self,
        playlist: Playlist,
        player: _Player,
        write: Callable[[str], object] = print,
    ) -> None:
        node = playlist.surahs.head
        if node is None:
            raise EmptyListError("no surahs to play")
        self._node = node
        self._player = player
        self._write = write
        self.playing = True
        self.finished = False
        self._loaded = False

    @property
    def current(self) -> Surah:
        """The surah the session is positioned on."""
        return self._node.data

    def start(self) -> None:
        """Begin playing the current surah."""
        self._step()

    def handle_key(self, key: int) -> bool:
        """React to one key press; returns False once playback has stopped."""
        if self.finished:
            raise RuntimeError("playback has already stopped")
        self._write(f"Key pressed: {int(key)}")
        if key == Key.RIGHT:
            if self._node.next is not None:
                self._node = self._node.next
                self._loaded = False
                self.playing = True
            else:
                self._write("That is the last Surah ")
        elif key == Key.LEFT:
            if self._node.prev is not None:
                self._node = self._node.prev
                self._loaded = False
                self.playing = True
            else:
                self._write("This is the first Surah ")
        elif key == Key.PAUSE:
            self.playing = False
            self._write("Paused.")
        elif key == Key.RESUME:
            self.playing = True
            self._loaded = False
            self._write("Resumed.")
        if key == Key.ESCAPE:
            self._player.stop()
            self._write("The Surah stopped playing.")
            self.finished = True
            return False
        self._step()
        return True

    def _step(self) -> None:
        if self.playing and not self._loaded:
            surah = self.current
            self._write(f"{surah.name} Surah is playing right now ")
            self._write(f"Playing sound from: {surah.path}")
            self._player.play(surah.path)
            self._loaded = True
        if not self.playing:
            self._player.stop()