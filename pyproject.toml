[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trnist"
version = "0.1.0"
description = "Dictionary lookups and a translator interface with signal-driven display panels"
requires-python = ">=3.10"
dependencies = []
keywords = ["dictionary", "translation", "language", "definitions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trnist"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
