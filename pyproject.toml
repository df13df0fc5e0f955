[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sgview"
version = "0.1.0"
description = "Scene graph toolkit: read scene command files, print their structure, transform lights and export scenes"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "scene graph",
    "3d",
    "lighting",
    "ppm",
    "trackball",
    "visitor",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
sgview = "sgview.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sgview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
