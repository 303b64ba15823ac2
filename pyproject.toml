[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Small command-line exercises: zero-bit counting, magic square checking and palindrome testing"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "exercises", "bits", "magic-square", "palindrome"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labkit-zerobits = "labkit.zerobits:main"
labkit-magic = "labkit.magic:main"
labkit-palindrome = "labkit.palindrome:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
