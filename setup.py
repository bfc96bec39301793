
from setuptools import setup, find_packages

setup(
    name="IEEEOps",
    version="0.1.0",
    description="IEEE 754 single-precision binary string to decimal decoder",
    author="IEEEOps Project",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "torch>=2.0.0",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "binfloat2dec = ieee_ops.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)
