# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="zeus",
    version="0.1.0",
    description="Tree-walking evaluator for the Zeus Lisp dialect",
    packages=find_namespace_packages(include=["zeus", "zeus.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["zeus=zeus.repl:main"],
    },
    zip_safe=False,
)
