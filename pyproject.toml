[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jtpost"
version = "0.1.0"
description = "Post lifecycle management for Telegram channels: statuses, slugs, statistics, plans and recommendations"
requires-python = ">=3.10"
dependencies = []
keywords = ["telegram", "posts", "blogging", "publishing", "slug", "transliteration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jtpost"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
