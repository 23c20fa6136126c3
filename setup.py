from setuptools import setup, find_packages

setup(
    name="text_sweeper",
    version="0.1",
    packages=find_packages(exclude=["tests"]),
    package_data={"backend": ["*.yaml"]},
    install_requires=[
        "flask",
        "pyyaml",
        "numpy"
    ],
    extras_require={
        "test": ["pytest"]
    },
    entry_points={
        "console_scripts": [
            "minesweeper=frontend.cli:main",
            "minesweeper-server=frontend.app:main"
        ]
    },
)
