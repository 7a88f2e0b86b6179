from setuptools import setup, find_namespace_packages

setup(
    name="dockdsl",
    version="0.1.0",
    description="Declarative builder for Dockerfiles",
    license="Apache-2.0",
    packages=find_namespace_packages(where="src", include=["dockdsl", "dockdsl.*"]),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.6",
        "pyyaml>=6.0",
        "click>=8.0",
        "jinja2>=3.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "dockdsl=dockdsl.CLI.main:main",
        ],
    },
)
