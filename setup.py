"""Setup script for gazool2048 package."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="gazool2048",
    version="0.1.0",
    author="Gazool 2048 contributors",
    description="Terminal 2048 with animated tile slides and a screen state machine",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["gazool", "gazool.*", "cli"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Development Status :: 3 - Alpha",
        "Environment :: Console :: Curses",
        "Intended Audience :: End Users/Desktop",
        "Topic :: Games/Entertainment :: Puzzle Games",
    ],
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.20.0",
        "gymnasium>=0.29.0",
        "windows-curses>=2.3; platform_system == 'Windows'",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "black>=21.0",
            "flake8>=3.8",
            "mypy>=0.900",
        ],
    },
    entry_points={
        "console_scripts": [
            "gazool-play=cli.play:main",
            "gazool-autoplay=cli.autoplay:main",
        ],
    },
)
