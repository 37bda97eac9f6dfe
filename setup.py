from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="depgraph",
    version="0.1.0",
    description="Test dependency graphs from completed test runs.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"depgraph.schemas": ["*.json"]},
    python_requires=">=3.11",
    install_requires=["networkx", "PyYAML", "jsonschema"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["depgraph=depgraph.cli:main"]},
)
