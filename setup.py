# setup.py
from setuptools import setup, find_packages

setup(
    name="egg-lang",
    version="0.1.0",
    description="Parser and tree-walking evaluator for the Egg expression language",
    python_requires=">=3.10",
    packages=find_packages(include=["egg", "egg.*"]),
    package_data={"egg": ["examples/*.eg"]},
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
