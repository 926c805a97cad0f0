[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tpengine"
version = "0.1.0"
description = "A small HTTP server built on a readiness event loop and a worker thread pool"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "thread-pool", "event-loop", "selectors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tpengine = "tpengine.server:main"

[tool.hatch.build.targets.wheel]
packages = ["tpengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
