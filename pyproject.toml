[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bhavaphala"
version = "0.1.0"
description = "Rule-based readings of Vedic birth charts: house effects, house-lord effects, karakamsha and Ashtakuta marriage matching"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "jyotisha",
    "vedic astrology",
    "bhava",
    "ashtakuta",
    "kundali matching",
    "karakamsha",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Religion",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Religion",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bhavaphala"]

[tool.hatch.build.targets.sdist]
include = ["bhavaphala", "tests", "README.md", "pyproject.toml"]

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
