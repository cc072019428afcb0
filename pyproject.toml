[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "diropql"
version = "0.1.0"
description = "Write, run and compress programs in the diropql esoteric language"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "diropql",
    "esoteric-language",
    "interpreter",
    "compression",
    "burrows-wheeler",
    "move-to-front",
    "run-length",
    "huffman",
    "base85",
]
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
    "Topic :: System :: Archiving :: Compression",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
diropql = "diropql.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["diropql"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
