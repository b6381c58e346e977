from setuptools import setup, find_packages

setup(
    name="kn_tools",
    version="0.1.0",
    author="Unknown",
    description="kn: change directories by abbreviating path components",
    packages=find_packages(include=["kn_common", "kn_core"]),
    py_modules=["kn_cli"],
    install_requires=[
        "prompt_toolkit==3.0.52",
        "thefuzz==0.22.1",
        "tabulate==0.9.0",
        "PyYAML==6.0.2",
    ],
    extras_require={
        "test": [  # Install by `pip install -e .[test]`
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "_kn=kn_cli:main",
        ],
    },
    python_requires=">=3.8",
)
