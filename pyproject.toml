[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "songe"
version = "0.2.0"
description = "A game with spoken menus, a picture-based character choice and a two-player Pong, built on pygame."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "pygame", "menu", "accessibility", "audio", "pong"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
songe = "songe.app:main"
songe-pong = "songe.pong:main"

[tool.hatch.build.targets.wheel]
packages = ["songe"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
