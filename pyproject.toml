[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "observatory"
version = "0.1.0"
description = "Signal pipeline, societal indicator models, report structures and simple scenario simulations"
requires-python = ">=3.10"
dependencies = []
keywords = ["foresight", "signals", "risk", "indicators", "scenarios", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["observatory"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
