[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "foodemo"
version = "0.8.0"
description = "A small example application showing how a foo is configured and greeted"
requires-python = ">=3.10"
keywords = ["example", "utility", "demo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
foodemo = "foodemo.main:main"

[tool.hatch.build.targets.wheel]
packages = ["foodemo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
