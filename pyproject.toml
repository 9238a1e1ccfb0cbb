[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bendkit"
version = "0.1.0"
description = "Front-end building blocks for a Bend-style compiler: imperative syntax tree, desugaring passes, interaction-net readback and compiler options"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "compiler",
    "interaction-nets",
    "lambda-calculus",
    "functional-programming",
    "desugaring",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bendkit"]

[tool.hatch.build.targets.sdist]
include = ["bendkit", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
