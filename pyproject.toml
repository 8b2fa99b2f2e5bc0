[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "leafedit"
version = "0.8.17"
description = "Core of a simple plain-text editor: buffer, undo/redo, search and replace, line numbers, menus, charsets and settings"
requires-python = ">=3.10"
dependencies = []
keywords = ["text editor", "undo", "redo", "search", "replace", "notepad"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
leafedit = "leafedit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["leafedit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
