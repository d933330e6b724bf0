[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptofound"
version = "0.1.1"
description = "Foundations of cryptography: Merkle trees, Lamport one-time signatures and the sum-check protocol"
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptography", "merkle", "lamport", "sumcheck", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cryptofound"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
