#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""The setup script."""

import pathlib

from setuptools import find_packages, setup

readme = pathlib.Path("README.rst").read_text()
history = pathlib.Path("HISTORY.rst").read_text()

requirements = pathlib.Path("requirements.txt").read_text().strip().splitlines()

test_requirements = ["pytest"]

setup(
    author="Phillip Cloud",
    author_email="cpcloud@gmail.com",
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    description="A dense, word-packed set of non-negative integers",
    install_requires=requirements,
    extras_require={"test": test_requirements},
    license="Apache Software License 2.0",
    long_description="{}\n\n{}".format(readme, history),
    include_package_data=True,
    keywords="densebit bitset",
    name="densebit",
    packages=find_packages(include=["densebit", "densebit.*"]),
    url="https://github.com/cpcloud/densebit",
    version="0.1.0",
    zip_safe=False,
    python_requires=">=3.10",
)
