[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "greekbot"
version = "0.1.0"
description = "Moderation, leaderboard, starboard and role logic for a language-learning chat community bot"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "bot", "moderation", "leaderboard", "starboard", "iso8601"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["greekbot"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
