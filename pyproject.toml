[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "syslabs"
version = "0.1.0"
description = "Small operating-systems exercises: CPU schedulers, a memory manager, a producer/consumer restaurant, a priority sort, a linked-list client and chat-server state."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "memory management",
    "threads",
    "producer consumer",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
syslabs-listclient = "syslabs.listclient:main"
syslabs-prioritysort = "syslabs.prioritysort:main"
syslabs-calculator = "syslabs.calculator:main"
syslabs-schedsim = "syslabs.scheduling:main"
syslabs-restaurant = "syslabs.restaurant_sim:main"
syslabs-mmu = "syslabs.mmu:main"

[tool.hatch.build.targets.wheel]
packages = ["syslabs"]

[tool.pytest.ini_options]
addopts = "-ra"
