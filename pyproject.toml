[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "restomenu"
version = "0.1.0"
description = "Console menus, food and drink items, and bill helpers for a small restaurant ordering program"
requires-python = ">=3.10"
dependencies = []
keywords = ["restaurant", "menu", "ordering", "point-of-sale", "console", "bill"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
restomenu-demo = "restomenu.demo:main"
restomenu-tester = "restomenu.tester:main"

[tool.hatch.build.targets.wheel]
packages = ["restomenu"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
