"""
Setup script for vocab-srs.

vocab-srs is the spaced-repetition core of a personalized vocabulary
learning platform:

1. Leitner Scheduling - Box-ladder review intervals per card
2. Adaptive Difficulty - Learner tier from accuracy and response time
3. Content Adjustment - Vocabulary level, question complexity and hints per tier

The 'vocab-srs' command is a terminal simulator for the scheduler.
"""

from setuptools import find_namespace_packages, setup

setup(
    name="vocab-srs",
    version="1.0.0",
    description="Leitner review scheduler with adaptive difficulty for vocabulary learning",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_namespace_packages(include=["src", "src.*"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
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
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "vocab-srs=src.cli.srs_cli:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="learning spaced-repetition leitner vocabulary education",
)
