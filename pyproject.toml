[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quizagent"
version = "0.1.0"
description = "A ReAct-style agent that researches a topic and writes multiple-choice quiz questions to a JSON file."
requires-python = ">=3.10"
keywords = ["agent", "react", "llm", "quiz", "duckduckgo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Education :: Testing",
]
dependencies = [
    "requests>=2.28",
    "beautifulsoup4>=4.11",
    "python-dotenv>=1.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
quizagent = "quizagent.agent:main"

[tool.hatch.build.targets.wheel]
packages = ["quizagent"]

[tool.pytest.ini_options]
addopts = "-ra"
