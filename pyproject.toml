[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "specargs"
version = "0.1.0"
description = "Command line parsing driven by POSIX-style usage spec strings compiled into a backtracking state machine"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "command-line", "arguments", "options", "parser", "spec", "fsm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["specargs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
