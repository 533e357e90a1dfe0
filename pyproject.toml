[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "myshell"
version = "1.0.0"
description = "A small interactive command-line shell with pipes, redirection, background jobs and variable expansion"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "command-line", "pipes", "redirection", "background-jobs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
myshell = "myshell.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["myshell"]

[tool.pytest.ini_options]
addopts = "-ra"
