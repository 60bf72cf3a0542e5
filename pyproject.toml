[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "proverclient"
version = "0.9.5"
description = "Building blocks for a proving-network node: task cache, system metrics, stats endpoint, release checks and display helpers"
requires-python = ">=3.10"
keywords = ["prover", "distributed computing", "task cache", "statistics", "version check", "dashboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Framework :: AsyncIO",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Distributed Computing",
]
dependencies = [
    "psutil>=5.9",
    "semver>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "pytest-asyncio>=0.23",
]

[project.scripts]
proverclient-fib = "proverclient.fib:main"

[tool.hatch.build.targets.wheel]
packages = ["proverclient"]

[tool.hatch.build.targets.sdist]
include = ["proverclient", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
