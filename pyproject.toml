[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "squeezekit"
version = "0.1.0"
description = "Audio compressor metering: peak, average and gain-reduction ballistics plus toolkit-free meter widget models"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "compressor", "meter", "ballistics", "decibel", "vu", "peak-meter"]
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
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["squeezekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
