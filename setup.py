# setup.py - Package the Hamming/edit embedding search
from setuptools import setup, find_packages

setup(
    name="hamming_edit",
    version="0.1.0",
    packages=find_packages(include=["hamming_edit", "hamming_edit.*"]),
    python_requires=">=3.8",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
)
