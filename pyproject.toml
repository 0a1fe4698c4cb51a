[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advutils"
version = "0.1.0"
description = "Numerical utilities: linear solvers, LU factorizations, a Riccati solver, sphere-fit sensor calibration, quaternions, a tick timer and fixed-capacity containers."
requires-python = ">=3.10"
keywords = [
    "linear algebra",
    "LU factorization",
    "Riccati",
    "calibration",
    "Gauss-Newton",
    "quaternion",
    "ring buffer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["advutils"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
