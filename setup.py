# setup.py
from setuptools import setup, find_packages

setup(
    name="enumerable",
    version="0.1.0",
    packages=find_packages(include=["enumerable", "enumerable.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
