# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="sharedfolder",
    version="0.1.0",
    description="Path mapping and directory scanning for folders shared with a remote IDE",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["sharedfolder*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'sharedfolder=sharedfolder.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
