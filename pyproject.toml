[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sphrax"
version = "0.1.0"
description = "Chess board primitives: pieces, squares, bitboards and attack tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "magic-bitboards", "attacks", "board-games"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sphrax"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
