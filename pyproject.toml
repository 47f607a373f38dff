[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dfamin"
version = "0.1.0"
description = "Interactive DFA minimization using Hopcroft's partition refinement"
requires-python = ">=3.10"
dependencies = []
keywords = ["automata", "dfa", "minimization", "hopcroft", "formal-languages"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dfamin = "dfamin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dfamin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
