from setuptools import find_packages
from setuptools import setup

setup(
    name="hdpath",
    version="0.1.0",
    packages=find_packages("src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "dev": [],
        "test": ["pytest", "bip32"],
        "bip32": ["bip32"],
    },
    entry_points={
        "console_scripts": ["hdpath = hdpath.__main__:main"],
    },
)
