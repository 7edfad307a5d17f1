from surahplaylist.surah import COLUMN_WIDTH, Surah


def test_defaults_are_single_spaces():
    surah = Surah()
    assert (surah.name, surah.reciter, surah.type, surah.path) == (" ", " ", " ", " ")


def test_fields_are_kept():
    surah = Surah("Fatiha", "Afasy", "wav", "fatiha.wav")
    assert surah.name == "Fatiha"
    assert surah.reciter == "Afasy"
    assert surah.type == "wav"
    assert surah.path == "fatiha.wav"


def test_fields_can_be_changed():
    surah = Surah("Fatiha", "Afasy", "wav", "fatiha.wav")
    surah.reciter = "Husary"
    surah.path = "other.wav"
    assert surah.reciter == "Husary"
    assert surah.path == "other.wav"


def test_format_row_layout():
    surah = Surah("Fatiha", "Afasy", "wav", "fatiha.wav")
    row = surah.format_row()
    assert row.startswith("Fatiha")
    assert row.endswith("fatiha.wav")
    assert len(row) == len("Fatiha") + 3 * COLUMN_WIDTH
    assert row.split() == ["Fatiha", "Afasy", "wav", "fatiha.wav"]


def test_format_row_does_not_truncate_long_fields():
    long_path = "recitations/" + "x" * 40 + ".wav"
    surah = Surah("Ikhlas", "Afasy", "wav", long_path)
    row = surah.format_row()
    assert row.endswith(long_path)
    assert long_path in row


def test_str_is_row():
    surah = Surah("Nas", "Sudais", "wav", "nas.wav")
    assert str(surah) == surah.format_row()


def test_equality():
    assert Surah("Nas", "Sudais", "wav", "nas.wav") == Surah("Nas", "Sudais", "wav", "nas.wav")
    assert not Surah("Nas", "Sudais", "wav", "nas.wav") == Surah("Nas", "Sudais", "mp3", "nas.wav")