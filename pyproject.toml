[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hsicompress"
version = "0.1.0"
description = "Reference-based lossy compression of hyperspectral images stored as ENVI-style header and raw int16 data."
requires-python = ">=3.10"
dependencies = []
keywords = ["hyperspectral", "hsi", "compression", "envi", "remote-sensing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hsicompress"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
