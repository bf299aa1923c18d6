[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vecscore"
version = "0.1.0"
description = "Parser for a compact text notation of musical scores: measures, beats, subdivisions, chords and ties."
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "score", "notation", "parser", "midi", "pitch"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Editors",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vecscore = "vecscore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vecscore"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
