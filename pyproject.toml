[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monkey_test"
version = "0.7.4"
description = "A property based testing tool with generators, shrinkers and reproducible seeds."
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "property", "quickcheck", "shrinking", "property-based-testing"]
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
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["monkey_test"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
