[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinychain"
version = "0.1.0"
description = "A minimal blockchain state machine with system, balances and proof-of-existence pallets"
requires-python = ">=3.10"
dependencies = []
keywords = ["blockchain", "runtime", "state-machine", "pallet", "ledger"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tinychain = "tinychain.runtime:main"

[tool.hatch.build.targets.wheel]
packages = ["tinychain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
