[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lawndefense"
version = "0.1.0"
description = "A lane-based lawn defence game against waves of zombies, with a simulation that runs without a window"
requires-python = ">=3.10"
keywords = ["game", "tower-defense", "pygame", "simulation", "lawn"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]
dependencies = [
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
lawndefense = "lawndefense.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lawndefense"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
