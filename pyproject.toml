[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuzzynet"
version = "3.0.0"
description = "Fuzzy logic systems and layered networks of fuzzy logic systems"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fuzzy logic",
    "fuzzy systems",
    "inference",
    "defuzzification",
    "fuzzy network",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fuzzynet-example = "fuzzynet.example:main"

[tool.hatch.build.targets.wheel]
packages = ["fuzzynet"]

[tool.pytest.ini_options]
addopts = "-ra"
