[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weekendtracer"
version = "0.1.0"
description = "A small path tracer: spheres, quads, BVH, textures, Perlin noise and Monte Carlo sampling"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["ray tracing", "path tracing", "rendering", "bvh", "perlin noise", "monte carlo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
weekendtracer-cos-cubed = "weekendtracer.montecarlo:main"

[tool.hatch.build.targets.wheel]
packages = ["weekendtracer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
