[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chainbench"
version = "0.1.0"
description = "Building blocks for running CIS software supply chain benchmark checks and reporting their results"
requires-python = ">=3.11"
keywords = ["security", "supply-chain", "cis", "benchmark", "compliance"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
]
dependencies = [
    "pyyaml",
    "jinja2",
    "packaging",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chainbench = "chainbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chainbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
