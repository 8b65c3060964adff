[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pvrkit"
version = "0.1.0"
description = "Readers for PowerVR texture files (DTEX, PVR), 24-bit BMP images and sample scene data, plus small fixed-capacity containers"
requires-python = ">=3.10"
dependencies = []
keywords = ["pvr", "dtex", "texture", "bmp", "vq", "twiddled", "powervr", "graphics"]
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
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pvrkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
