#!/usr/bin/env python3
from pathlib import Path

import setuptools
from setuptools import setup

this_dir = Path(__file__).parent

requirements = []
requirements_path = this_dir / "requirements.txt"
if requirements_path.is_file():
    with open(requirements_path, "r", encoding="utf-8") as requirements_file:
        requirements = requirements_file.read().splitlines()

# -----------------------------------------------------------------------------

setup(
    name="canto-braille",
    version="1.0.0",
    description="Transliteration between Hong Kong Cantonese Braille and Jyutping.",
    license="MIT",
    packages=setuptools.find_packages(include=["canto_braille", "canto_braille.*"]),
    entry_points={
        "console_scripts": [
            "canto-braille = canto_braille.__main__:main",
        ]
    },
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Text Processing :: Linguistic",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="cantonese braille jyutping transliteration",
)
