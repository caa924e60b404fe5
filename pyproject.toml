[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "querylang"
version = "0.1.0"
description = "Tokenizer and compiler for a small boolean search-query language"
requires-python = ">=3.10"
dependencies = []
keywords = ["search", "query", "parser", "boolean", "tokenizer"]
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
    "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
querylang = "querylang.compiler:main"

[tool.hatch.build.targets.wheel]
packages = ["querylang"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
