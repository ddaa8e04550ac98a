[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ballotcrypto"
version = "0.1.0"
description = "Pure-Python AES key schedules and tables, SHA-256/384/512 and filename-safe Base64"
requires-python = ">=3.10"
dependencies = []
keywords = ["aes", "key-schedule", "sha256", "sha512", "sha384", "base64", "cryptography"]
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ballotcrypto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
