[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pfmt"
version = "0.1.0"
description = "A printf-style formatter for c, s, d, i, u, x, X, p and % conversions, with a few C-style string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["printf", "format", "string", "formatting"]
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
packages = ["pfmt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
