[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "shelltools"
version = "0.1.0"
description = "A small interactive shell, a two-command pipeline runner and the string, memory and list helpers behind them"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "pipeline", "pipex", "strings", "linked-list", "get-next-line"]
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
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shelltools-shell = "shelltools.shell:main"
shelltools-pipex = "shelltools.pipex:main"

[tool.setuptools.packages.find]
include = ["shelltools*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
