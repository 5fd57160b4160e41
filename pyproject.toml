[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "prvhashkit"
version = "4.3.7"
description = "PRVHASH hash functions, a keyed streamed XOR function and PRVHASH-based pseudo-random number generators"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "prvhash",
    "hash",
    "prng",
    "random",
    "stream-cipher",
    "gradilac",
    "tango642",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
prvhashkit-rng = "prvhashkit.prvrng:main"
prvhashkit-proofs = "prvhashkit.proofs:main"

[tool.hatch.build.targets.wheel]
packages = ["prvhashkit"]

[tool.hatch.build.targets.sdist]
include = [
    "prvhashkit",
    "tests",
    "pyproject.toml",
]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
