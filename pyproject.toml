[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "philo"
version = "0.1.0"
description = "A simulation of the dining philosophers problem with threads and locks"
requires-python = ">=3.10"
keywords = ["dining-philosophers", "threads", "concurrency", "mutex", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
philo = "philo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["philo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
