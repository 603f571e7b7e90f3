# setup.py
from setuptools import setup, find_packages

setup(
    name="skippy",
    version="0.0.7",
    description="Tree-walking evaluator for a small Lisp with S- and Q-expressions",
    packages=find_packages(include=["skippy", "skippy.*"]),
    python_requires=">=3.9",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["skippy=skippy.repl:main"],
    },
    zip_safe=False,
)
