[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "examfactory"
version = "0.1.0"
description = "Report-line evaluators for GATE, JEE and IELTS questions, created through per-exam and per-question-type factories"
requires-python = ">=3.10"
dependencies = []
keywords = ["exam", "evaluation", "factory", "design-patterns", "gate", "jee", "ielts"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
examfactory-abstract = "examfactory.abstract_factory:main"
examfactory-method = "examfactory.factory_method:main"

[tool.hatch.build.targets.wheel]
packages = ["examfactory"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
