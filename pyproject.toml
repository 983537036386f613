[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "grab"
version = "0.1.0"
description = "A small HTTP/1.1 client over plain TCP sockets, with a bounded task queue and a worker thread pool for concurrent fetches"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "client", "fetch", "thread-pool", "sockets", "benchmark"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grab = "grab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["grab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
