[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mdtranspile"
version = "0.1.0"
description = "A small Markdown to HTML converter built from a line lexer, a block parser and an HTML generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "html", "converter", "lexer", "parser"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mdtranspile = "mdtranspile.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mdtranspile"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
