[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ratiokit"
version = "0.1.0"
description = "Exact rational ratios with 64-bit overflow checks, SI and IEC prefixes, and durations that carry their unit"
requires-python = ">=3.10"
dependencies = []
keywords = ["ratio", "rational", "fraction", "duration", "si-prefix", "overflow"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ratiokit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
