[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lemkit"
version = "0.1.0"
description = "Number parsing, string helpers, printf-style formatting, XPM images and ant-farm room parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "xpm", "parsing", "text", "colors", "rooms"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lemkit"]

[tool.pytest.ini_options]
addopts = "-ra"
