[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cim-ipld"
version = "0.3.0"
description = "Content type identifiers and codec mapping for Composable Information Machines"
requires-python = ">=3.10"
dependencies = []
keywords = ["ipld", "codec", "content-type", "content-addressing", "cim"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cim_ipld"]

[tool.pytest.ini_options]
addopts = "-ra"
