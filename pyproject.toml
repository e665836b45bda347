[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "notifyhub"
version = "0.1.0"
description = "Multi-channel notification dispatch over Telegram and e-mail, configured from YAML"
requires-python = ">=3.10"
keywords = ["notifications", "telegram", "email", "smtp", "messaging"]
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
    "Topic :: Communications",
    "Topic :: Communications :: Email",
    "Topic :: Communications :: Chat",
]
dependencies = [
    "pyyaml",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["notifyhub"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
