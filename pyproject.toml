[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wrapkit"
version = "0.1.0"
description = "Circuit breaker for callables and for whole objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["circuit-breaker", "resilience", "wrapper", "proxy", "fault-tolerance"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wrapkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
