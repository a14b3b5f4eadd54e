[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shardkeys"
version = "0.1.0"
description = "Reversible bit-shuffling encoders that spread sequential keys across shards"
requires-python = ">=3.10"
dependencies = []
keywords = ["sharding", "keys", "uuid", "ulid", "bit-reversal", "cluster"]
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
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shardkeys-demo32 = "shardkeys.demo32:main"
shardkeys-demo64 = "shardkeys.demo64:main"

[tool.hatch.build.targets.wheel]
packages = ["shardkeys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
