[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "layoututils"
version = "3.0.0"
description = "Utility helpers for layout tools: shared pointers, dependency ordering, string enums, error helpers and file serialization"
requires-python = ">=3.11"
keywords = ["layout", "integrated-circuit", "serialization", "dependency-ordering", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pyyaml>=6.0",
    "tomli-w>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[tool.hatch.build.targets.wheel]
packages = ["layoututils"]

[tool.hatch.build.targets.sdist]
include = ["layoututils", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
