[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chipeight"
version = "0.1.0"
description = "CHIP-8 machine state, font, instruction handlers and a pygame window"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["chip-8", "chip8", "emulator", "interpreter", "virtual machine"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chipeight = "chipeight.app:main"

[tool.hatch.build.targets.wheel]
packages = ["chipeight"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
