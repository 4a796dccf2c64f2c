[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokersim"
version = "0.1.0"
description = "Monte Carlo estimate of how often each of several poker hands wins"
requires-python = ">=3.10"
dependencies = []
keywords = ["poker", "monte carlo", "simulation", "cards", "hand evaluation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pokersim = "pokersim.simulation:main"

[tool.hatch.build.targets.wheel]
packages = ["pokersim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
