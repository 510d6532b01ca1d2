[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicekit"
version = "0.1.0"
description = "Small building blocks: number helpers, money, card decks, searches, filters, stacks, queues, a tiny WSGI router and in-memory movie metadata and rating services."
requires-python = ">=3.10"
keywords = [
    "wsgi",
    "router",
    "hateoas",
    "middleware",
    "service-discovery",
    "card-deck",
    "data-structures",
    "dotenv",
]
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
    "Topic :: Internet :: WWW/HTTP :: WSGI :: Application",
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
practicekit-rating-server = "practicekit.movies.rating_server:main"

[tool.hatch.build.targets.wheel]
packages = ["practicekit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
