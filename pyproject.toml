[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termfm"
version = "0.1.3"
description = "Configuration, key bindings, themes and terminal image encoding for a terminal file manager"
requires-python = ">=3.11"
keywords = ["file-manager", "terminal", "tui", "keymap", "kitty", "sixel", "iterm2", "ueberzug"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
]
dependencies = [
    "pillow",
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["termfm"]

[tool.pytest.ini_options]
addopts = "-ra"
