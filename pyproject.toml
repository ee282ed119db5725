[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "runikit"
version = "0.1.0"
description = "Kernel building blocks in pure Python: intrusive lists, a simulated buddy allocator, error codes, argument splitting and sudoku game logic"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "unikernel",
    "buddy-allocator",
    "intrusive-list",
    "errno",
    "sudoku",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Operating System Kernels",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["runikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
