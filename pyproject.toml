[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plumlabs"
version = "0.1.0"
description = "A small article publishing service that turns uploaded Markdown into HTML, stores it in SQLite and serves it over HTTP."
requires-python = ">=3.10"
keywords = ["markdown", "articles", "cms", "wsgi", "htmx", "sqlite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content :: Content Management System",
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Text Processing :: Markup :: Markdown",
]
dependencies = [
    "werkzeug",
    "jinja2",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
plumlabs = "plumlabs.server:main"
plumlabs-front = "plumlabs.frontend:main"

[tool.hatch.build.targets.wheel]
packages = ["plumlabs"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
