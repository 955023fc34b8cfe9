[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "headsup"
version = "0.1.0"
description = "Heads-up Texas hold'em building blocks: cards, hand ranking, betting rules, pots and a random-strategy WebSocket bot"
requires-python = ">=3.10"
keywords = ["poker", "texas-holdem", "heads-up", "hand-evaluation", "bot", "websocket"]
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
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "websocket-client",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
headsup-bot = "headsup.client:main"

[tool.hatch.build.targets.wheel]
packages = ["headsup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
