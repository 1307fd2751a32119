[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "otelkit"
version = "0.1.0"
description = "Semantic-convention attribute helpers, gRPC status mapping, metadata carriers and coloured console logging for tracing instrumentation"
requires-python = ">=3.10"
dependencies = []
keywords = ["opentelemetry", "tracing", "semantic-conventions", "grpc", "http", "logging"]
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
    "Topic :: System :: Monitoring",
    "Topic :: System :: Logging",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["otelkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
