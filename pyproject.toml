[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "greencube"
version = "0.1.0"
description = "A small third-person walk across a procedurally generated block terrain"
requires-python = ">=3.10"
keywords = ["game", "terrain", "blocks", "frustum-culling", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
dependencies = [
    "pygame",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
greencube = "greencube.app:main"

[tool.hatch.build.targets.wheel]
packages = ["greencube"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
