[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gameball"
version = "0.1.0"
description = "Rigid-body physics, game-world logic and a third-person camera for a rolling-ball game"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["physics", "rigid body", "game", "simulation", "collision", "camera"]
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
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gameball"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
