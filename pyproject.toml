[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursus"
version = "0.1.0"
description = "A printf formatter, a buffered line reader, a push_swap sorter and checker, a wireframe height-map viewer and a shell-style pipeline runner"
requires-python = ">=3.10"
keywords = ["printf", "get_next_line", "push_swap", "fdf", "pipex", "wireframe", "pipeline", "sorting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
push_swap = "cursus.push_swap:main"
checker = "cursus.checker:main"
fdf = "cursus.fdf_app:main"
pipex = "cursus.pipex:main"
pipex-bonus = "cursus.pipex:main_bonus"

[tool.hatch.build.targets.wheel]
packages = ["cursus"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
