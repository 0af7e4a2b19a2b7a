[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "erdview"
version = "0.1.0"
description = "Load and validate entity-relationship diagrams stored as JSON and render them to SVG"
requires-python = ">=3.10"
dependencies = []
keywords = ["erd", "entity-relationship", "diagram", "json", "svg", "viewer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
erdview = "erdview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["erdview"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
