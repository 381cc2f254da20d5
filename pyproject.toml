[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "uaparse"
version = "1.0.0"
description = "User-agent string parser driven by a regexes.yaml rule file, with snippet indexing for fast rule selection"
requires-python = ">=3.10"
dependencies = [
    "pyyaml",
]
keywords = ["user-agent", "parser", "browser", "device", "os"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
uaparse-bench = "uaparse.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["uaparse"]

[tool.pytest.ini_options]
addopts = "-ra"
