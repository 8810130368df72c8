[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "energon"
version = "0.1.0"
description = "Terminal game: talk with Optimus Prime and Megatron and fuse energon crystals in a vault"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "crystals", "fusion", "chatbot"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
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
energon = "energon.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["energon"]

[tool.pytest.ini_options]
addopts = "-ra"
