from setuptools import setup, find_packages

setup(
    name="cue-file-formatter",
    version="0.1.0",
    description="Convert rekordbox .cue files into clean, export-ready tracklists",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "chardet>=5.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "cue-formatter=cue_formatter.cli:main",
        ],
    },
)
