[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tortuelang"
version = "1.0.0"
description = "Building blocks for a small turtle language: expressions, conditions, instructions, tokens and an in-memory walled garden"
requires-python = ">=3.10"
dependencies = []
keywords = ["turtle", "interpreter", "ast", "education", "garden"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tortuelang"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
