[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mrpbackend"
version = "0.1.0"
description = "Data layer for a mining back office: master data, employee side records, equipment backlogs, expiry reports and dashboards."
requires-python = ">=3.10"
dependencies = [
    "sqlalchemy",
]
keywords = ["hr", "backlog", "heavy-equipment", "dashboard", "master-data", "repository"]
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
    "Topic :: Office/Business",
    "Topic :: Database",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["mrpbackend"]

[tool.pytest.ini_options]
addopts = "-ra"
