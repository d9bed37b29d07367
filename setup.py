# setup.py
from setuptools import setup, find_packages

setup(
    name="risp",
    version="0.1.0",
    description="A small line-oriented Lisp interpreter with an HTTP fetch primitive",
    packages=find_packages(include=["risp", "risp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.25",
        "loguru>=0.7",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.90",
        ],
    },
    zip_safe=False,
)
