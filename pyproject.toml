[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minihf"
version = "0.1.0"
description = "A minimal restricted Hartree-Fock solver over contracted s-type Gaussian basis functions"
requires-python = ">=3.10"
keywords = ["hartree-fock", "quantum chemistry", "scf", "gaussian basis", "sto-3g"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Chemistry",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minihf = "minihf.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minihf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
