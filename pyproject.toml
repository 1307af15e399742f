[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "carassembly"
version = "0.1.0"
description = "Interactive console car assembly simulator that checks part combinations"
requires-python = ">=3.10"
dependencies = []
keywords = ["car", "assembly", "simulation", "console", "interactive"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Korean",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
carassembly = "carassembly.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["carassembly"]

[tool.pytest.ini_options]
addopts = "-ra"
