# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="frontbrain",
    version="0.1.0",
    description="Static introspection of Vue + TypeScript source trees: structure snapshot and typing hygiene report",
    packages=find_namespace_packages(where="src", include=["frontbrain*"]),  # Sub-packages have no __init__.py
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'frontbrain=frontbrain.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
