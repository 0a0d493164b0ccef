[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nmlpy"
version = "0.1.0"
description = "A small pure-Python matrix library: arithmetic, row echelon forms, LUP and QR decompositions, linear systems"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "matrix",
    "linear algebra",
    "lup decomposition",
    "qr decomposition",
    "row echelon",
    "determinant",
    "inverse",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nmlpy-demo = "nmlpy.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["nmlpy"]

[tool.hatch.build.targets.sdist]
include = ["nmlpy", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
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
