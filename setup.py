""" keymaker build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import keymaker

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=keymaker.name,
    version=keymaker.__version__,
    license=keymaker.__license__,
    author=keymaker.__author__,
    author_email=keymaker.__author_email__,
    description="Deterministic wallet keys from BIP39 mnemonic phrases",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["coincurve>=18", "mnemonic>=0.20"],
    extras_require={"tests": ["pytest"]},
    keywords=(
        "bitcoin cryptography ecdsa secp256k1 RFC-6979 "
        "bip32 bip39 mnemonic seed wif base58"
    ),
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
