[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cvmattest"
version = "0.1.0"
description = "Building blocks for confidential VM attestation: evidence documents, VCEK retrieval and JWT unsealing"
requires-python = ">=3.10"
keywords = ["attestation", "tpm", "sev-snp", "confidential-computing", "jwt"]
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
    "Topic :: Security",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cvmattest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
