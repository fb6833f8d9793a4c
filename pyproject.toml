[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asaogea"
version = "0.1.0"
description = "Engine support toolkit: frame profiler, resource handles, reader/writer locks, job system, input state, camera and shader definitions"
requires-python = ">=3.10"
keywords = ["engine", "profiler", "job-system", "camera", "quaternion", "input", "shaders"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["asaogea"]

[tool.pytest.ini_options]
addopts = "-ra"
