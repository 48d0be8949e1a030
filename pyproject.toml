[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fluxprog"
version = "0.1.0"
description = "Flowchart blocks and the flowchart file format for a visual robot-programming environment"
requires-python = ">=3.10"
dependencies = []
keywords = ["flowchart", "robotics", "education", "visual programming"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fluxprog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
