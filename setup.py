# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="near-socialdb",
    version="0.1.0",
    description="Client for the NEAR SocialDB contract with write diffing and storage deposit estimation",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["near_socialdb", "near_socialdb.*"]),
    python_requires=">=3.8",
    install_requires=[
        "requests>=2.28",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'near-socialdb=near_socialdb.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
