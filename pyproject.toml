[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matpair"
version = "0.1.0"
description = "Generate, read, multiply and time batches of integer matrix pairs stored in a plain-text format."
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "multiplication", "benchmark", "linear algebra", "parallel"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
matpair-generate = "matpair.generator:main"
matpair-multiply = "matpair.runner:main"
matpair-multiply-parallel = "matpair.runner:parallel_main"

[tool.hatch.build.targets.wheel]
packages = ["matpair"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
