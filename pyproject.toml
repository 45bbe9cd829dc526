[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minycraft"
version = "0.1.0"
description = "A small voxel terrain sandbox: Perlin-noise chunks, blended heightmaps and a free-flying camera rendered with OpenGL."
requires-python = ">=3.10"
keywords = ["voxel", "terrain", "perlin", "opengl", "game", "chunks"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "pyglet",
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minycraft = "minycraft.app:main"

[tool.hatch.build.targets.wheel]
packages = ["minycraft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
