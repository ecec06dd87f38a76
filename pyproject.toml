[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wireshapes"
version = "0.1.0"
description = "Wireframe line meshes for debug drawing of collision shapes: boxes, spheres, capsules, planes, height fields and meshes."
requires-python = ">=3.10"
dependencies = []
keywords = ["wireframe", "debug draw", "collision", "geometry", "mesh", "3d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wireshapes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
