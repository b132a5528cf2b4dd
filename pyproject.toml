[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dodgeball"
version = "0.1.0"
description = "A small arcade game: dodge the bouncing red balls, grab power-ups and beat your high score."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "dodge", "pygame"]
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dodgeball = "dodgeball.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dodgeball"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
