[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "cframe"
version = "1.0.4"
description = "Vector and matrix math, camera, OBJ loading, trackball and scene-object simulation for a small real-time 3D framework"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "graphics", "matrix", "vector", "camera", "obj", "trackball", "particles"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["cframe*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
