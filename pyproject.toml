[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "airmirror"
version = "0.1.0"
description = "Building blocks for a screen-mirroring receiver: pairing, stream decryption, FairPlay replies and response building"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["mirroring", "rtsp", "pairing", "aes", "ed25519", "x25519", "ntp", "fairplay"]
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
    "Topic :: Multimedia :: Video",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["airmirror"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
