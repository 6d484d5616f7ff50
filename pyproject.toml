[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftprint"
version = "0.1.0"
description = "A small printf-style formatter supporting the %c %s %d %i %u %x %X %p and %% conversions"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "format", "formatting", "conversion", "text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ftprint"]

[tool.pytest.ini_options]
addopts = "-ra"
