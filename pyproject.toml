[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "magica"
version = "0.1.0"
description = "Turn-based terminal battle game between two small armies of equipped units"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "terminal", "curses", "turn-based", "strategy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
magica = "magica.app:main"

[tool.setuptools.packages.find]
include = ["magica*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
