# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treeify",
    version="0.1.0",
    description="Print the contents of a directory as an indented tree",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treeify*"]),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treeify=treeify.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
