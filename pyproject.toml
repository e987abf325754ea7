[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "softsched"
version = "0.1.0"
description = "A cooperative priority task scheduler with software timers that flag tasks on tick."
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduler", "timer", "cooperative", "embedded", "tasks"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["softsched"]

[tool.pytest.ini_options]
addopts = "-ra"
