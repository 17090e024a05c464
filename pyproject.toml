[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gsc"
version = "0.1.0"
description = "Pure-Python block and stream ciphers, padding schemes, cipher modes and the SM3 hash"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "aes",
    "rc4",
    "rc5",
    "sm3",
    "sm4",
    "cbc",
    "ctr",
    "padding",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gsc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
