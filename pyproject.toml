[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lightmime"
version = "0.1.0"
description = "Lightweight building blocks for MIME messages: addresses, headers, base64 and boundaries"
requires-python = ">=3.10"
dependencies = []
keywords = ["mime", "email", "base64", "rfc822", "headers", "boundary"]
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
    "Topic :: Communications :: Email",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lightmime"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
