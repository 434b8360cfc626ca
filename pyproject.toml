[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodrills"
version = "0.1.0"
description = "Small, classic algorithm exercises: linked-list arithmetic, binary addition, Roman numerals, Tower of Hanoi and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "exercises",
    "linked-list",
    "binary-addition",
    "roman-numerals",
    "tower-of-hanoi",
    "square-root",
]
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
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algodrills-linkedlist = "algodrills.linkedlist:main"
algodrills-binary = "algodrills.binary:main"
algodrills-stairs = "algodrills.stairs:main"
algodrills-search = "algodrills.search:main"
algodrills-roman = "algodrills.roman:main"
algodrills-sqrt = "algodrills.sqrt:main"
algodrills-hanoi = "algodrills.hanoi:main"

[tool.hatch.build.targets.wheel]
packages = ["algodrills"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
