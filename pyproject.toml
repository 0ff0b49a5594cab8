[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "handykaraoke"
version = "0.1.0"
description = "Karaoke song index, NCN file reading, lyrics cursor timing and mixer state for a MIDI karaoke player"
requires-python = ">=3.10"
dependencies = []
keywords = ["karaoke", "midi", "ncn", "lyrics", "mixer", "song database"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Natural Language :: Thai",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
handykaraoke = "handykaraoke.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["handykaraoke"]

[tool.pytest.ini_options]
addopts = "-ra"
