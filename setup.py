# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="tree-indexer",
    version="0.1.0",
    description="Directory tree snapshots with root file contents for agent context",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["tree_indexer*"]),
    package_data={
        "tree_indexer": ["commands/*.md", "commands/**/*.md"],
    },
    python_requires=">=3.8",
    install_requires=[
        "gitignore_parser>=0.1.11",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        'console_scripts': [
            'tree-indexer=tree_indexer.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
