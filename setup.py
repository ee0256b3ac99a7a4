from pathlib import Path

from setuptools import find_packages, setup

version: dict[str, str] = {}
exec(Path("structargs/version.py").read_text(encoding="UTF-8"), version)

setup(
    name="structargs",
    version=version["__version__"],
    description="Parse command lines straight into typed dataclass records.",
    long_description=open("README.md", encoding="UTF-8").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich>=13",
        "pydantic>=2",
        "python-dateutil>=2.8",
        "python-json-logger>=3",
        "toml>=0.10",
        "PyYAML>=6",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
