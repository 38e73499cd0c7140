[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exercisebook"
version = "0.1.0"
description = "Small worked programs: a bank simulation, Huffman coding, a phishing scanner, a Simpletron machine, poker hands, fixed-size record files and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "exercises",
    "huffman",
    "simpletron",
    "poker",
    "morse",
    "statistics",
    "records",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
exercisebook-bank = "exercisebook.bank:main"
exercisebook-huffman = "exercisebook.huffman:main"
exercisebook-phishing = "exercisebook.phishing:main"
exercisebook-simpletron = "exercisebook.simpletron:main"
exercisebook-morse = "exercisebook.morse:main"
exercisebook-phrases = "exercisebook.phrases:main"
exercisebook-phone = "exercisebook.phone:main"
exercisebook-stats = "exercisebook.stats:main"
exercisebook-carbon = "exercisebook.carbon:main"
exercisebook-gradebook = "exercisebook.gradebook:main"

[tool.hatch.build.targets.wheel]
packages = ["exercisebook"]

[tool.hatch.build.targets.sdist]
include = ["exercisebook", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
