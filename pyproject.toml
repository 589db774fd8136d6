[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "medtrace"
version = "0.1.0"
description = "Flask API that serves drug history and organization records from a MedTrace ledger contract"
requires-python = ">=3.10"
keywords = ["medtrace", "ledger", "supply-chain", "drug-tracing", "flask", "rest-api"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["medtrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
