# surahplaylist

A small terminal program for organising recitations of Quran surahs into
named playlists. You can add and remove playlists, add surahs (name, reciter,
type and audio file path) to them, list what you have, write everything to a
text file, load a playlist from a word list, and step through a playlist's
audio.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Start the interactive menu:

```
surahplaylist
```

The menu reads whitespace-separated words from standard input, so it can be
typed at or fed from a file. It offers these choices:

1. Add a new playlist
2. Add a surah to an existing playlist (name, reciter, type, path)
3. Remove a surah from an existing playlist (by 1-based position)
4. Shows the current playlists, the same as 5
5. Display all current playlists
6. Display the surahs of every playlist
7. Display the surahs of one playlist
8. Play the surahs of one playlist
9. Save the playlists to a file
10. Load a playlist from a file
11. Remove an existing playlist (by 1-based position)
12. Exit

A choice outside 1 to 12 is answered with a prompt to choose again. The menu
ends on choice 12 or when the input runs out.

### Playback controls

After choice 8 and a playlist name, the following input words steer
playback, one per key press:

| Word            | Action                        |
|-----------------|-------------------------------|
| `right`, `->`   | next surah                    |
| `left`, `<-`    | previous surah                |
| `up`, `^`       | pause                         |
| `down`, `v`     | resume (restarts the surah)   |
| `esc`           | stop and return to the menu   |

A number is taken as a raw key code (27 escape, 75 left, 77 right, 94 pause,
118 resume); any other word is ignored. Playback also stops when the input
runs out.

### File formats

Choice 9 writes a readable report, one line per field:

```
The name of the playlist is morning
Surah name :Al-Fatiha
Reciter: Reciter
Type: Meccan
Path: fatiha.wav
```

Choice 10 reads a different, plain format: the first word of the file is the
playlist name and every following group of four words is one surah's name,
reciter, type and path. An incomplete last group is dropped, and one
playlist is added per file.

## Using it as a library

```python
from surahplaylist.surah import Surah
from surahplaylist.playlist import Playlist
from surahplaylist.library import PlaylistLibrary

library = PlaylistLibrary()
morning = Playlist("morning")
morning.add_surah(Surah("Al-Fatiha", "Reciter", "Meccan", "fatiha.wav"))
library.add_playlist(morning)

print(library.format_playlists())
print(library.format_all_surahs())
library.save("playlists.txt")
```

- `surahplaylist.surah.Surah` is a dataclass with `name`, `reciter`, `type`
  and `path`; `format_row()` gives one table row.
- `surahplaylist.playlist.Playlist` holds surahs in order: `add_surah`,
  `remove_surah(position)`, `format_surahs()` and `play(keys, player, write)`.
  `PlaybackSession` holds the state of one playback and takes keys one at a
  time through `handle_key`. `Key` lists the key codes.
- `surahplaylist.library.PlaylistLibrary` holds playlists: `add_playlist`,
  `remove_playlist(position)`, `get_playlist(name)`, `format_playlists()`,
  `format_all_surahs()`, `save(filename)` and `load(filename)`.
- `surahplaylist.linkedlist.DoublyLinkedList` is the ordered container both
  use, with 1-based `insert_at` and `delete_at`; removing from an empty list
  raises `EmptyListError`, an out-of-range position raises `IndexError` and a
  position below 1 raises `ValueError`.
- `surahplaylist.cli.run(lines, write, player)` runs the whole menu over a
  sequence of input lines and returns the resulting library.

A player passed to `play` or `run` is any object with `play(path)` and
`stop()` methods, so playback can be scripted or tested without sound.

## What it does not do

- Sound is played only through the Windows `winsound` module
  (`default_player()`), which plays WAV files. On other systems, playing
  without a player of your own reports that no audio backend is available.
- Arrow keys are not read straight from the keyboard; playback keys are
  words typed on the input, as listed above.
- There is no command to reorder a playlist; choice 4 only lists playlists.
- A file written by choice 9 cannot be read back by choice 10 as the same
  playlists; the two use different formats.