[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mytorch"
version = "0.1.0"
description = "A small feed-forward neural network that learns to classify chess positions from FEN boards"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["neural network", "machine learning", "chess", "fen", "backpropagation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mytorch = "mytorch.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mytorch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
