[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hopstep"
version = "0.1.0"
description = "Core object model for a small game engine: names, reflection, delegates, garbage collection and engine globals."
requires-python = ">=3.10"
dependencies = []
keywords = ["game-engine", "reflection", "garbage-collection", "delegates", "object-model"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hopstep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
