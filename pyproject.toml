[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "donorbank"
version = "0.1.0"
description = "Interactive console register of blood donors kept in a plain text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["blood", "donors", "registry", "console", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
donorbank = "donorbank.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["donorbank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
