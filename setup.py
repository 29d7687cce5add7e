# setup.py
from setuptools import setup, find_packages

setup(
    name="mclisp",
    version="0.1.0",
    description="A minimal interpreter for McCarthy's 1960 Lisp",
    packages=find_packages(include=["mclisp", "mclisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["mclisp=mclisp.cli:main"],
    },
    zip_safe=False,
)
