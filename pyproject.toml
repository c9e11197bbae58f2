[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iotclassroom"
version = "0.1.0"
description = "Classroom IoT toolkit: Hue bulb and Wemo outlet control, button, encoder and timer helpers, colour tables"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "iot",
    "hue",
    "wemo",
    "smart-outlet",
    "rotary-encoder",
    "button",
    "home-automation",
    "classroom",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
iotclassroom = "iotclassroom.app:main"

[tool.hatch.build.targets.wheel]
packages = ["iotclassroom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
