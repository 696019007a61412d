[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "echoctl"
version = "1.0.0"
description = "Building blocks for device-control software: result codes, CRCs, byte buffers, event queues and threads, timers, INI-style config files, GPS time conversion and file-system helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "crc",
    "ring-buffer",
    "byte-buffer",
    "event-queue",
    "semaphore",
    "gps-time",
    "config",
    "device-control",
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

[tool.hatch.build.targets.wheel]
packages = ["echoctl"]

[tool.pytest.ini_options]
addopts = "-ra"
