[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinytwin"
version = "0.1.0"
description = "Core pieces of a tiny window system: fixed-point square roots, ARGB pixels and blur, box layout, animation frames, draggable handles and pointer tracking"
requires-python = ">=3.10"
dependencies = []
keywords = ["window system", "fixed point", "graphics", "layout", "blur", "animation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: Window Managers",
    "Topic :: Multimedia :: Graphics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tinytwin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
