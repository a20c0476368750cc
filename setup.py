# setup.py
from setuptools import setup, find_packages

setup(
    name="aaqz",
    version="0.1.0",
    description="Tree-walking interpreter for the AAQZ language",
    packages=find_packages(include=["aaqz", "aaqz.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["aaqz=aaqz.__main__:main"],
    },
    zip_safe=False,
)
