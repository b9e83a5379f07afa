[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cqlx"
version = "1.0.0"
description = "Fluent CQL statement builders that return a statement together with its named parameters"
requires-python = ">=3.10"
dependencies = []
keywords = ["cql", "cassandra", "scylla", "query builder", "database"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cqlx"]

[tool.hatch.build.targets.sdist]
include = ["cqlx", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
