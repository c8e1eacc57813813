#!/usr/bin/env python

# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later

# -*- encoding: utf-8 -*-

from setuptools import find_packages
from setuptools import setup

setup(
    name="keyhooks",
    version="0.0.0",
    license="GPL-3.0-or-later",
    description="Multi-step keyboard shortcut matching for keystreams",
    long_description="Recognizes user-defined keystroke sequences in a stream of keyboard events and fires an action when one completes.",
    author="Rose Davidson",
    author_email="rose@metaclassical.com",
    packages=find_packages("src"),
    package_dir={"": "src"},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        # complete classifier list: http://pypi.python.org/pypi?%3Aaction=list_classifiers
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Software Development :: Libraries",
    ],
    keywords=["keyboard", "shortcuts", "hotkeys", "key sequences"],
    python_requires=">=3.10",
    install_requires=[
        "cattrs>=22.1.0",
        "msgspec>=0.18",
        "tomli>=1.1.0",
        "trio>=0.23.0",
    ],
    extras_require={
        "test": ["pytest>=6.2.4", "pytest-trio>=0.8.0"],
    },
    setup_requires=[
        "setuptools>=30.3.0",
        "wheel",
    ],
)
