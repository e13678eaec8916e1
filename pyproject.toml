[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clubdesk"
version = "0.1.0"
description = "Terminal front desk for a computer club: seats, clients, reservations and product sales on SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["computer club", "reservations", "booking", "point of sale", "sqlite", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clubdesk = "clubdesk.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["clubdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
