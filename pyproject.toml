[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zappy"
version = "0.1.0"
description = "A networked multiplayer tile-world game: game server with a graphic monitor protocol, and an autonomous player client."
requires-python = ">=3.10"
dependencies = []
keywords = ["zappy", "game", "server", "multiplayer", "simulation", "tcp", "ai"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Internet",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
zappy-server = "zappy.server:main"
zappy-ai = "zappy.ai_client:main"
zappy-client = "zappy.launcher:main"

[tool.hatch.build.targets.wheel]
packages = ["zappy"]

[tool.hatch.build.targets.sdist]
include = ["zappy", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
