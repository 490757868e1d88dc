[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spsmonitor"
version = "0.1.0"
description = "Collects service provider system status (SMS, MMS, voice, e-mail, billing, support, incidents) and serves it as JSON over HTTP"
requires-python = ">=3.11"
dependencies = [
    "pyyaml",
]
keywords = ["monitoring", "status", "sms", "mms", "billing", "support", "incidents"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spsmonitor = "spsmonitor.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["spsmonitor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
