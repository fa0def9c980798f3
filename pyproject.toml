[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustysword"
version = "0.2.0"
description = "A small terminal arcade game: swing your sword at monsters that hunt you down."
requires-python = ">=3.10"
keywords = ["game", "terminal", "arcade", "blessed", "pygame"]
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "blessed",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rustysword = "rustysword.game:main"

[tool.hatch.build.targets.wheel]
packages = ["rustysword"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
