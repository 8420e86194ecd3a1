[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "notefinder"
version = "0.1.0"
description = "Search plain-text notes, files and Firefox bookmarks from one place"
requires-python = ">=3.10"
dependencies = []
keywords = ["notes", "bookmarks", "search", "stemming", "firefox"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
notefinder = "notefinder.app:main"

[tool.hatch.build.targets.wheel]
packages = ["notefinder"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
