[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "squeezebench"
version = "0.1.0"
description = "Huffman, LZ77, mixed and arithmetic compressors with a benchmark of compression ratios on integer data"
requires-python = ">=3.10"
keywords = ["compression", "huffman", "lz77", "arithmetic-coding", "vlq", "benchmark"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Archiving :: Compression",
    "Topic :: System :: Benchmark",
]
dependencies = [
    "mpmath",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
squeezebench = "squeezebench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["squeezebench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
