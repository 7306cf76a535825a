[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hessiankit"
version = "0.1.0"
description = "Building blocks of the Hessian 2 serialization protocol: longs, nulls, list type tags and Java value and exception types."
requires-python = ">=3.10"
dependencies = []
keywords = ["hessian", "serialization", "rpc", "java", "binary-protocol"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hessiankit"]

[tool.pytest.ini_options]
addopts = "-ra"
