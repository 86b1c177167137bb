[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "constlang"
version = "0.2.7"
description = "A tiny integer expression language with bindings, blocks and functions, plus an interactive prompt"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "language", "repl", "expression", "toy-language"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
constlang = "constlang.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["constlang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
