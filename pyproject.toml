[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "multibutton"
version = "1.0.0"
description = "Tick-driven button state machine with debouncing, click, double-click, repeat and long-press detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["button", "debounce", "gpio", "state-machine", "embedded", "click", "long-press"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
multibutton-basic-demo = "multibutton.basic_demo:main"
multibutton-poll-demo = "multibutton.poll_demo:main"
multibutton-advanced-demo = "multibutton.advanced_demo:main"

[tool.hatch.build.targets.wheel]
packages = ["multibutton"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
