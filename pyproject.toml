[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skilltui"
version = "0.1.0"
description = "Styled rendering, widgets and skill/settings panes for a terminal interface that manages agent skills"
requires-python = ">=3.10"
dependencies = [
    "wcwidth",
]
keywords = ["tui", "terminal", "skills", "agents", "ansi", "widgets"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["skilltui"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
