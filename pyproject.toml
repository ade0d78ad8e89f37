[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crckit"
version = "1.0.0"
description = "CRC and NMEA checksum routines: CRC-8, CRC-16, Modbus, CCITT, XModem, Kermit, DNP, Sick, CRC-32 and CRC-64"
requires-python = ">=3.10"
dependencies = []
keywords = ["crc", "checksum", "crc8", "crc16", "crc32", "crc64", "modbus", "ccitt", "xmodem", "kermit", "dnp", "nmea"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
crckit = "crckit.cli:main"
crckit-precalc = "crckit.precalc:main"

[tool.hatch.build.targets.wheel]
packages = ["crckit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
