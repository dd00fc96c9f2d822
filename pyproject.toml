[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edwards25519"
version = "0.1.0"
description = "Group operations on the Edwards form of Curve25519: point compression, scalar and multiscalar multiplication"
requires-python = ">=3.10"
dependencies = []
keywords = ["curve25519", "ed25519", "edwards", "elliptic-curve", "cryptography", "multiscalar"]
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
    "Topic :: Security :: Cryptography",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["edwards25519"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
