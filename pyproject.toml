[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kernelkit"
version = "0.1.0"
description = "Building blocks for interactive computing kernels: message signing, connection files, reply helpers and input history"
requires-python = ">=3.10"
dependencies = []
keywords = ["kernel", "notebook", "hmac", "connection-file", "history"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["kernelkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
