from setuptools import setup, find_packages

setup(
    name="x2-colon",
    version="0.1.0",
    description="Sum timestamp ranges embedded in scripts and strip them out",
    author="Valerio Galano",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "x2colon=x2colon.cli:main",
        ],
    },
)
