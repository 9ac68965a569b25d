[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logdrill"
version = "0.1.0"
description = "Filter log files by regular expressions, save the matches and optionally serve them over HTTP"
requires-python = ">=3.10"
dependencies = []
keywords = ["logs", "regex", "filter", "log-analysis", "grep"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Log Analysis",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logdrill = "logdrill.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["logdrill"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
