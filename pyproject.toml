[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "examdesk"
version = "0.1.0"
description = "Question bank and exam records kept in plain-text files, with parsers, formatters and a file-backed store"
requires-python = ">=3.10"
dependencies = []
keywords = ["exam", "quiz", "education", "question-bank", "plain-text"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["examdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
