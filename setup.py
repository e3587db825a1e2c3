"""Setup script for debate response scoring package"""

from pathlib import Path
from setuptools import find_packages, setup

readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

setup(
    name="debate-response-scorer",
    version="1.0.0",
    description="Analyze and score argumentative debate responses against a weighted rubric",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="debate-check",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "debate_scorer.scoring": ["default_rubric.yaml"],
    },
    python_requires=">=3.10",
    install_requires=[
        "click>=8.0.0",
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "debate-scorer=debate_scorer.cli:main",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
