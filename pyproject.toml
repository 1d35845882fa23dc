[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "core2kit"
version = "0.1.0"
description = "Helpers for a small embedded board: 3D math, JSON building, a 128x64 one-bit framebuffer, keyboard mapping, file and clock utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "linear-algebra", "quaternion", "framebuffer", "oled", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["core2kit"]

[tool.pytest.ini_options]
addopts = "-ra"
