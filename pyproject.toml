[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridpathviz"
version = "0.1.0"
description = "Interactive step-by-step A* pathfinding visualization on an editable grid"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["a-star", "pathfinding", "grid", "visualization", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gridpathviz = "gridpathviz.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gridpathviz"]

[tool.pytest.ini_options]
addopts = "-ra"
