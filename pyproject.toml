[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gmdoc"
version = "0.1.0"
description = "Collect source files into Markdown documents, driven by a YAML configuration."
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["markdown", "documentation", "source code", "yaml", "generator"]
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
    "Topic :: Software Development :: Documentation",
    "Topic :: Text Processing :: Markup :: Markdown",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gmd = "gmdoc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gmdoc"]

[tool.pytest.ini_options]
addopts = "-ra"
