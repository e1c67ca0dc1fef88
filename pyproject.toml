[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "voicepad"
version = "0.1.0"
description = "A small polyphonic sine-voice synthesizer with a queued parameter-event system"
requires-python = ">=3.10"
dependencies = []
keywords = ["synthesizer", "sine", "oscillator", "midi", "audio", "wav"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
voicepad = "voicepad.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["voicepad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
