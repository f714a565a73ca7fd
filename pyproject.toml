[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "diffblend"
version = "0.1.0"
description = "Difference-blend trails from image sequences: highlight what changed between consecutive frames."
requires-python = ">=3.10"
keywords = ["image", "difference", "blend", "motion", "trail", "frames"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
diffblend = "diffblend.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["diffblend"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
