[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trialmenu"
version = "1.7.1"
description = "Keyboard-driven console menus for running and inspecting small code trials"
requires-python = ">=3.10"
dependencies = []
keywords = ["console", "menu", "testing", "inspector", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["trialmenu"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
