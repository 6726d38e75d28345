[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslib"
version = "0.1.0"
description = "Small container types: singly and doubly linked lists, a growable vector and a mutable string."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "vector", "string", "containers"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dslib-singly-demo = "dslib.singly_linked:main"
dslib-doubly-demo = "dslib.doubly_linked:main"
dslib-string-demo = "dslib.text:main"
dslib-vector-demo = "dslib.vector:main"

[tool.hatch.build.targets.wheel]
packages = ["dslib"]

[tool.hatch.build.targets.sdist]
include = ["dslib", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
