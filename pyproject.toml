[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdkpeek"
version = "0.1.0"
description = "Detect the .NET SDK version in use for a directory, fast enough for a shell prompt"
requires-python = ">=3.10"
dependencies = []
keywords = ["dotnet", "sdk", "prompt", "global.json", "shell"]
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
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sdkpeek = "sdkpeek.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sdkpeek"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
