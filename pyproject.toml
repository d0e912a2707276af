[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rdsdecode"
version = "0.1.0"
description = "Decoding helpers for Radio Data System (RDS) groups: block fields, alternative frequencies, clock time, country codes and station state."
requires-python = ">=3.10"
dependencies = []
keywords = ["rds", "radio", "fm", "radio-data-system", "decoder"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rdsdecode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
