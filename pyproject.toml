[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cmdrepl"
version = "0.1.0"
description = "A small interactive command processor for the terminal, with line editing, history and argument validation rules."
requires-python = ">=3.10"
dependencies = []
keywords = ["repl", "command-line", "shell", "terminal", "history", "interactive"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cmdrepl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
