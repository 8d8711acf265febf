[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "supertrunfo"
version = "0.1.0"
description = "Super Trunfo card games for the terminal: a single card duel and a full countries game against the computer"
requires-python = ">=3.10"
dependencies = []
keywords = ["super trunfo", "top trumps", "card game", "terminal game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
supertrunfo-duelo = "supertrunfo.duel:main"
supertrunfo-paises = "supertrunfo.countries:main"

[tool.hatch.build.targets.wheel]
packages = ["supertrunfo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
