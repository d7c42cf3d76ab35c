[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fkocrypt"
version = "0.1.0"
description = "Pure-Python SHA-1, SHA-2 and SHA-3 digests, bounded string copying and SPA state flags"
requires-python = ">=3.10"
dependencies = []
keywords = ["sha1", "sha256", "sha384", "sha512", "sha3", "keccak", "digest", "spa"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["fkocrypt"]

[tool.pytest.ini_options]
addopts = "-ra"
