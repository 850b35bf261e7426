[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stakematch"
version = "0.1.0"
description = "In-memory escrow and result oracle for staked chess matches"
requires-python = ">=3.10"
dependencies = []
keywords = ["escrow", "oracle", "chess", "stake", "ledger", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stakematch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
