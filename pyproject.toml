[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wardtrack"
version = "0.1.0"
description = "Track hospital patients, their stay zones and the medicines prescribed to them, stored in SQLite."
requires-python = ">=3.10"
dependencies = []
keywords = ["hospital", "patients", "medicine", "prescriptions", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
    "Topic :: Database",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wardtrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
