"""
eveclient reads and writes REST resources guarded by etags.

Please refer to README.rst for how to use it.
"""

from __future__ import annotations

from setuptools import Command
from setuptools import find_packages
from setuptools import setup

requirements = [
    "click>=5.0,<9.0",
    "click-log>=0.3.0, <0.5.0",
    "aiohttp>=3.8.2,<4.0.0",
]

test_requirements = [
    "hypothesis>=5.0.0,<7.0.0",
    "pytest",
    "pytest-asyncio",
    "aioresponses",
    "aiohttp<3.14",  # aioresponses 0.7.9 is incompatible with aiohttp 3.14
]


class PrintRequirements(Command):
    description = "Prints minimal requirements"
    user_options: list = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        for requirement in requirements:
            print(requirement.replace(">", "=").replace(" ", ""))


with open("README.rst") as f:
    long_description = f.read()


setup(
    # General metadata
    name="eveclient",
    version="0.1.0",
    author="eveclient contributors",
    description="Read and write etag-guarded REST resources",
    license="BSD",
    long_description=long_description,
    # Runtime dependencies
    install_requires=requirements,
    # Optional dependencies
    extras_require={
        "test": test_requirements,
    },
    # Other
    packages=find_packages(exclude=["tests.*", "tests"]),
    include_package_data=True,
    cmdclass={"minimal_requirements": PrintRequirements},
    entry_points={"console_scripts": ["eveclient = eveclient.cli:app"]},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "License :: OSI Approved :: BSD License",
        "Operating System :: POSIX",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Topic :: Internet",
        "Topic :: Utilities",
    ],
)
