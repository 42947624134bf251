[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datetimescan"
version = "0.0.1"
description = "Find ISO-style datetimes in text, then count them, measure the gaps between them and total continuous activity"
requires-python = ">=3.10"
dependencies = []
keywords = ["datetime", "iso8601", "log", "timesheet", "text", "scan"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
datetimescan = "datetimescan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["datetimescan"]

[tool.pytest.ini_options]
addopts = "-ra"
