""" sqlite_varint build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import sqlite_varint

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=sqlite_varint.name,
    version=sqlite_varint.__version__,
    license=sqlite_varint.__license__,
    author=sqlite_varint.__author__,
    author_email=sqlite_varint.__author_email__,
    description="SQLite file-format varint encoding and decoding",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["dataclasses-json"],
    extras_require={"test": ["pytest"]},
    keywords="sqlite varint file-format serialization",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Database",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
