[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consolekit"
version = "0.1.0"
description = "Read and decode SGR mouse reports and kitty keyboard escape sequences from a terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "mouse", "keyboard", "escape sequences", "sgr", "kitty"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
consolekit = "consolekit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["consolekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
