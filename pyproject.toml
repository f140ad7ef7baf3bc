[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aphkit"
version = "0.1.0"
description = "Engine groundwork: bit helpers, result values, UUIDv4 identifiers, shader and queue types, resource-state conversions and sampler presets."
requires-python = ">=3.11"
dependencies = []
keywords = [
    "engine",
    "bit-manipulation",
    "uuid",
    "graphics",
    "shader",
    "sampler",
    "gpu",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aphkit"]

[tool.hatch.build.targets.sdist]
include = ["aphkit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
