[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "roviews"
version = "0.1.0"
description = "Read-only views over sequences and mappings for exposing collections without exposing mutation."
requires-python = ">=3.10"
dependencies = []
keywords = ["collections", "read-only", "views", "immutable", "encapsulation"]
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
packages = ["roviews"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
