[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gostcrypto"
version = "0.1.0"
description = "GOST 28147-89 block cipher and GOST R 34.10 signatures and key agreement in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["gost", "cryptography", "28147-89", "34.10", "signature", "vko", "elliptic-curve"]
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
packages = ["gostcrypto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
