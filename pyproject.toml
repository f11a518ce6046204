[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptolab"
version = "0.1.0"
description = "Worked experiments in classical cryptanalysis: discrete logarithms, Diffie-Hellman values, MD5 collisions, character frequencies and meet-in-the-middle on triple DES."
requires-python = ">=3.10"
keywords = [
    "cryptography",
    "cryptanalysis",
    "discrete-logarithm",
    "diffie-hellman",
    "meet-in-the-middle",
    "des",
    "triple-des",
    "md5",
    "frequency-analysis",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "pycryptodome",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cryptolab-md5-collision = "cryptolab.md5_collision:main"
cryptolab-freq = "cryptolab.freq:main"
cryptolab-keyspace = "cryptolab.keyspace:main"
cryptolab-dh-params = "cryptolab.dh_params:main"
cryptolab-dlog = "cryptolab.dlog:main"
cryptolab-des-keys = "cryptolab.des_keys:main"
cryptolab-mitm3des = "cryptolab.mitm3des:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptolab"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
