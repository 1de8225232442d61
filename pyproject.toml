[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "usercrud"
version = "0.1.0"
description = "A small JSON HTTP service for creating, reading, updating and deleting user records in a SQL database"
requires-python = ">=3.10"
keywords = ["crud", "users", "rest", "http", "json", "postgresql", "flask", "sqlalchemy"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask>=2.2",
    "sqlalchemy>=2.0",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
usercrud = "usercrud.app:main"

[tool.hatch.build.targets.wheel]
packages = ["usercrud"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
