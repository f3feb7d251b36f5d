[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strangeasm"
version = "0.1.0"
description = "First pass of a two-pass assembler for a 10-bit teaching machine, with strange base-4 number conversions"
requires-python = ">=3.10"
dependencies = []
keywords = ["assembler", "two-pass", "symbol table", "base 4", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Assemblers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["strangeasm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
