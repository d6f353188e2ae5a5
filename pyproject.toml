[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xurls"
version = "0.1.0"
description = "Extract URLs from plain text using regular expressions"
requires-python = ">=3.10"
dependencies = [
    "regex",
]
keywords = ["url", "extract", "regex", "text", "links"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
xurls = "xurls.cli:main"
xurls-generate = "xurls.generate:main"

[tool.hatch.build.targets.wheel]
packages = ["xurls"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
