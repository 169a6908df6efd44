from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="capflow",
    version="0.1.0",
    description="Maximum flow in capacitated directed graphs (Edmonds-Karp).",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*", "examples")),
    python_requires=">=3.10",
    install_requires=["networkx", "numpy", "pyyaml"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["capflow=capflow.cli:main"]},
)
