[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "modrelease"
version = "0.1.0"
description = "Prepare and tag coordinated releases of a multi-module Go repository"
requires-python = ">=3.10"
dependencies = []
keywords = ["release", "go", "modules", "versioning", "git", "tags"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
modrelease = "modrelease.release:main"

[tool.hatch.build.targets.wheel]
packages = ["modrelease"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
