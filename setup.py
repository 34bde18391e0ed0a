from setuptools import setup, find_packages

setup(
    name="basicfmt",
    version="0.1.0",
    description="Indent, format & renumber line-numbered BASIC source",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "typer",
        "rich",
        "python-dotenv",
        "watchdog",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "basicfmt=basicfmt.cli.app:app",
        ],
    },
    python_requires=">=3.10",
)
