[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockout"
version = "0.1.0"
description = "Pit, pieces, sound sequencing and software rasterising for a 3D falling-block puzzle game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "blockout", "3d", "psg", "sound", "raster", "bitmap-font"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blockout"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
