[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "civitree"
version = "0.1.0"
description = "City and resident registry plus a non-binary tree explorer, each with an interactive text menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "tree", "non-binary tree", "traversal", "data structures", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
civitree-registry = "civitree.registry_cli:main"
civitree-tree = "civitree.nbtree_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["civitree"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
