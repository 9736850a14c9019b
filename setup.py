import os
import io

from setuptools import setup, find_packages

cwd = os.path.abspath(os.path.dirname(__file__))

with io.open(os.path.join(cwd, "README.rst"), encoding="utf-8") as fd:
    long_description = fd.read()

VERSION = "1.0.0"

setup(
    name="b58codec",
    version=VERSION,
    description=("Base58 encoding and decoding of binary data."),
    long_description=long_description,
    long_description_content_type="text/x-rst",
    license='BSD 3-clause "New" or "Revised" License',
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development",
        "Topic :: Utilities",
    ],
    keywords=["base58", "encoding", "bitcoin"],
    packages=find_packages(where="src", exclude=["test"]),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["b58codec=b58codec.cli:main"],
    },
)
