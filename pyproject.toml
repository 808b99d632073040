[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rvperf"
version = "0.1.0"
description = "Building blocks of a RISC-V performance model and a Dhrystone workload"
requires-python = ">=3.10"
dependencies = []
keywords = ["risc-v", "performance-model", "tlb", "load-store", "flush", "dhrystone", "simulation"]
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
    "Topic :: System :: Emulators",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rvperf-dhrystone = "rvperf.dhrystone:main"

[tool.hatch.build.targets.wheel]
packages = ["rvperf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
