"""Setup configuration for twitterkit package."""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="twitterkit",
    version="0.1.0",
    author="Developer",
    description="Typed views and stream events on top of the Twitter v1.1 API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/twitterkit",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "tweepy>=4.10,<5",
        "requests>=2.28.0",
        "python-dotenv>=0.20.0",
        "APScheduler>=3.9,<4",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=22.0.0",
            "pylint>=2.15.0",
            "mypy>=0.990",
        ],
    },
    entry_points={
        "console_scripts": [
            "twitterkit-demo=twitterkit.main:main",
        ],
    },
)
