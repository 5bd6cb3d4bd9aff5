[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "taskweave"
version = "0.1.0"
description = "Task queues, deferred scheduling and chainable continuations for threaded Python programs."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tasks",
    "scheduler",
    "queue",
    "continuations",
    "futures",
    "threads",
    "concurrency",
]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
taskweave-benchmark = "taskweave.benchmark:main"

[tool.setuptools.packages.find]
include = ["taskweave", "taskweave.*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
