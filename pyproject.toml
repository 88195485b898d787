[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pibot"
version = "0.1.0"
description = "Motor, mecanum drive, servo and WebSocket control components for a small robot, with an in-memory GPIO backend"
requires-python = ">=3.10"
dependencies = [
    "websockets",
]
keywords = ["robot", "gpio", "mecanum", "servo", "motor", "websocket"]
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
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
pibot = "pibot.main:main"

[tool.hatch.build.targets.wheel]
packages = ["pibot"]

[tool.pytest.ini_options]
addopts = "-ra"
