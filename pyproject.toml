[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecipkit"
version = "0.1.0"
description = "Emulated Curve25519 field elements and twisted Edwards to short Weierstrass point conversion"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "elliptic curves",
    "curve25519",
    "ed25519",
    "wei25519",
    "twisted edwards",
    "weierstrass",
    "finite fields",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ecipkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
