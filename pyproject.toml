[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternshowcase"
version = "0.1.0"
description = "Small runnable examples of classic design patterns: observer, strategy, builder, factories, singleton, decorator and facade."
requires-python = ">=3.10"
dependencies = []
keywords = ["design patterns", "observer", "strategy", "builder", "factory", "singleton", "decorator", "facade", "examples"]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternshowcase = "patternshowcase.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["patternshowcase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
