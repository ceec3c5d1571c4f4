[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ustrkit"
version = "0.1.0"
description = "UTF-8 aware string and string-list utilities that index by code point"
requires-python = ">=3.10"
dependencies = []
keywords = ["utf-8", "unicode", "codepoint", "string", "split", "join"]
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
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ustrkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
