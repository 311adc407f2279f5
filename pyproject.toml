[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noisekit"
version = "0.1.0"
description = "Coherent noise utilities: permutation tables, point transformers, noise maps, colour gradients and image rendering"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["noise", "procedural", "terrain", "gradient", "heightmap", "rendering"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["noisekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
