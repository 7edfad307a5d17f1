[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "surahplaylist"
version = "0.1.0"
description = "Build, save, load and play playlists of Quran surah recitations from the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["quran", "surah", "playlist", "audio", "player", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
surahplaylist = "surahplaylist.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["surahplaylist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
