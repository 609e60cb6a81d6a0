# setup.py
from setuptools import setup, find_packages

setup(
    name="pycombinator",
    version="0.1.0",
    description="A minimal expression language with lexically scoped closures",
    packages=find_packages(include=["pycombinator", "pycombinator.*"]),
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["pycombinator=pycombinator.repl:main"],
    },
    zip_safe=False,
)
