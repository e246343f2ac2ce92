[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keyhouse"
version = "0.1.0"
description = "Key management building blocks: AES-256-GCM codec, client codings, master key providers and control-plane helpers"
requires-python = ">=3.10"
dependencies = [
    "cryptography",
]
keywords = ["kms", "key management", "aes-gcm", "hkdf", "secrets"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["keyhouse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
