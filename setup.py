from setuptools import setup, find_packages

setup(
    name="textloader",
    version="0.1",
    description="Streaming loader for labeled dense and sparse feature vectors stored in delimited text files.",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pandas>=1.5.3",
        "numpy>=1.24.4",
        "pyyaml>=6.0.1",
    ],
    extras_require={
        "tests": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["textloader=textloader.cli:main"],
    },
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
