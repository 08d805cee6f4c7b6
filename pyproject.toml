[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gnablib"
version = "0.1.0"
description = "IPv4 address, mask and CIDR helpers with a merging IP tree, plus RIPEMD and Whirlpool hashes"
requires-python = ">=3.10"
dependencies = []
keywords = ["ipv4", "cidr", "netmask", "ip-tree", "ripemd", "whirlpool", "hash"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Security :: Cryptography",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gnablib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
