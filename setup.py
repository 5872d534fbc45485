# setup.py
from setuptools import setup, find_packages

setup(
    name="rustl",
    version="0.1.0",
    description="Tree-walking evaluator for the Rustl scripting language",
    packages=find_packages(include=["rustl", "rustl.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
