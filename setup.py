"""
Setup script for learning-commons.

Learning Commons is the knowledge graph and content evaluation engine behind
the intervention planning app. It serves two roles:

1. Skill Graph - prerequisite lookups, learning progressions, skill mapping
2. Content Evaluators - SCASS text complexity and motivation scoring

The HTTP API is served by 'learning_commons.api.main:app'.
"""

from setuptools import find_packages, setup

setup(
    name="learning-commons",
    version="1.0.0",
    description="Knowledge graph and content evaluation engine for intervention planning",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="Learning Commons",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        # API
        "fastapi>=0.100.0",
        "uvicorn>=0.23.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "httpx>=0.25.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
    ],
    keywords="learning knowledge-graph readability education intervention",
)
