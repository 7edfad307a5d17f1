"""The surah record held by playlists."""

from __future__ import annotations

from dataclasses import dataclass

COLUMN_WIDTH = 20


@dataclass
class Surah:
    """A recitation: surah name, reciter, type and the path of its audio file."""

    name: str = " "
    reciter: str = " "
    type: str = " "
    path: str = " "

    def format_row(self) -> str:
        """One table row: the name, then the other fields right-aligned in columns."""
        return (
            f"{self.name}"
            f"{self.reciter:>{COLUMN_WIDTH}}"
            f"{self.type:>{COLUMN_WIDTH}}"
            f"{self.path:>{COLUMN_WIDTH}}"
        )

    def __str__(self) -> str:
        return self.format_row()