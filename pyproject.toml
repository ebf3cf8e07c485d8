[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodemos"
version = "0.1.0"
description = "Small, runnable demonstrations of language basics, data structures, classic algorithms, threads and a tiny HTTP server."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "education",
    "sorting",
    "searching",
    "graphs",
    "dynamic-programming",
    "threading",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algodemos = "algodemos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algodemos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
