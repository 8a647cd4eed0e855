[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zhttp"
version = "0.1.0"
description = "HTTP request parsing, response building and path routing for small HTTP servers"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "router", "parser", "request", "response"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["zhttp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
