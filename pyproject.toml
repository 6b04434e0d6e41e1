[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dxball"
version = "0.1.0"
description = "A small brick-breaker arcade game with a ball, a paddle and six rows of bricks"
requires-python = ">=3.10"
keywords = ["game", "arcade", "breakout", "bricks", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dxball = "dxball.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dxball"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
