[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tankarena"
version = "0.1.0"
description = "Tick-based simulation core for a top-down 2D tank battle game: units, bullets, obstacles, particles and an event queue."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "simulation", "tank", "2d", "arena"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tankarena"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
