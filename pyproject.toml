[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "logx"
version = "0.1.0"
description = "A small levelled logger with colored terminal output and pluggable log writers."
requires-python = ">=3.10"
dependencies = []
keywords = ["logging", "logger", "log writers", "terminal", "colors"]
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
    "Topic :: System :: Logging",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
logx-demo = "logx.demo:main"
logx-showcase = "logx.showcase:main"
logx-benchmarks = "logx.benchmarks:main"

[tool.hatch.build.targets.wheel]
packages = ["logx"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
