from setuptools import setup, find_packages

setup(
    name="termline",
    version="0.1.0",
    description="Colored output, single-line overwrites and live line blocks for terminals",
    packages=find_packages(include=["termline", "termline.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)
