[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ocikit"
version = "0.1.0"
description = "Small utility toolkit: allocators, a bump arena, a growable vector, string slices and a seeded random number generator."
requires-python = ">=3.10"
dependencies = []
keywords = ["allocator", "arena", "vector", "string", "slice", "rng", "utilities"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ocikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
