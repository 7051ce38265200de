[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tankduel"
version = "0.1.0"
description = "Two-player artillery duel on a deformable sine-wave terrain"
requires-python = ">=3.10"
keywords = ["game", "artillery", "tanks", "pygame", "2d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tankduel = "tankduel.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tankduel"]

[tool.pytest.ini_options]
addopts = "-ra"
