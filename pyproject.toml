[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ironwood"
version = "0.1.0"
description = "Building blocks for an S-expression evaluation engine: string interning, typed values and an expression AST"
requires-python = ">=3.10"
dependencies = []
keywords = ["expressions", "evaluation", "s-expressions", "lisp", "scheme", "interning"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ironwood"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
