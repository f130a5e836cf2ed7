[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "famicore"
version = "0.1.0"
description = "Building blocks of an NES emulator: CPU bus memory map, 6502 opcode table, CPU addressing and ROM reader"
requires-python = ">=3.10"
dependencies = []
keywords = ["nes", "6502", "emulator", "famicom", "cpu"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
famicore = "famicore.main:main"

[tool.hatch.build.targets.wheel]
packages = ["famicore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
