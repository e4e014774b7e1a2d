[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fieldwise"
version = "0.1.0"
description = "Field-by-field access, comparison, hashing and text IO for dataclasses, named tuples and other record types"
requires-python = ">=3.10"
dependencies = []
keywords = ["reflection", "dataclass", "namedtuple", "fields", "comparison", "hashing"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fieldwise"]

[tool.pytest.ini_options]
addopts = "-ra"
