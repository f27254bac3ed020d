[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eso"
version = "0.1.0"
description = "Scene state for a small 3D game: textured mesh builders, swizzled PNG textures, a reference-aware asset store and first-person player movement"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["3d", "mesh", "texture", "swizzle", "png", "game", "assets"]
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
test = [
    "pytest",
    "pillow",
]

[tool.hatch.build.targets.wheel]
packages = ["eso"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
