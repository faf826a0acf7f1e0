[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "univeasier"
version = "0.1.0"
description = "HTTP API over a MySQL database of university records: people, interests and university types."
requires-python = ">=3.10"
keywords = ["university", "rest", "api", "flask", "mysql", "sql-builder"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Database :: Front-Ends",
]
dependencies = [
    "flask>=2.2",
    "pymysql>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
univeasier = "univeasier.server:main"

[tool.hatch.build.targets.wheel]
packages = ["univeasier"]

[tool.hatch.build.targets.sdist]
include = ["univeasier", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
