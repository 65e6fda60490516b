[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "windrain"
version = "0.1.0"
description = "Wind-driven rain physics: fluid properties, droplet models, catch ratios, patch conditions, sun position and time-dependent sources"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["wind-driven rain", "catch ratio", "raindrops", "drag", "solar position", "cfd"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["windrain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
