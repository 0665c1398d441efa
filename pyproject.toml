[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "megacore"
version = "0.1.0"
description = "Microcontroller core library building blocks: strings, printing, streams, ring buffers, IP addresses and USB plumbing"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "microcontroller",
    "string",
    "stream",
    "ring-buffer",
    "ip-address",
    "usb",
    "print",
    "serial",
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
packages = ["megacore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
