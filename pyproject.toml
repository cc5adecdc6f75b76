[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "y2k"
version = "0.1.0"
description = "An interpreter for an esoteric language whose programs are read from file timestamps"
requires-python = ">=3.10"
dependencies = []
keywords = ["esoteric", "interpreter", "esolang", "timestamps"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
y2k = "y2k.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["y2k"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
