[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wfrest"
version = "0.9.7"
description = "Building blocks for a REST framework: an ordered JSON value type, base64, timestamps, string pieces, thread ids and request aspects"
requires-python = ">=3.10"
dependencies = []
keywords = ["rest", "json", "base64", "timestamp", "aspect", "middleware"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wfrest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
