[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "procdisplay"
version = "0.1.0"
description = "A terminal process and CPU usage monitor with sorting, filtering and live charts"
requires-python = ">=3.10"
keywords = ["process", "monitor", "terminal", "cpu", "top", "tui", "curses"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
procdisplay = "procdisplay.main:main"

[tool.hatch.build.targets.wheel]
packages = ["procdisplay"]

[tool.pytest.ini_options]
addopts = "-ra"
