[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toycrypto"
version = "0.1.0"
description = "Small, readable implementations of textbook RSA, the ChaCha stream cipher, prime fields, elliptic curves, the Tate pairing and ECDSA for learning."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "cryptography",
    "education",
    "chacha",
    "rsa",
    "finite-field",
    "elliptic-curve",
    "pairing",
    "ecdsa",
]
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
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["toycrypto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
