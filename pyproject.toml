[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "msdfkit"
version = "0.1.0"
description = "Building blocks for multi-channel signed distance fields: vectors, bitmaps, clash-based error correction and simple image writers."
requires-python = ">=3.10"
dependencies = []
keywords = ["msdf", "sdf", "signed distance field", "bitmap", "tiff", "bmp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["msdfkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
