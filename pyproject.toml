[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sgp40-driver"
version = "0.1.0"
description = "Driver for the SGP40 VOC gas sensor on a Linux I2C bus"
requires-python = ">=3.10"
dependencies = []
keywords = ["sgp40", "voc", "gas sensor", "i2c", "crc8", "linux"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Instrument Drivers",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sgp40-read = "sgp40_driver.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sgp40_driver"]

[tool.hatch.build.targets.sdist]
include = ["sgp40_driver", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
