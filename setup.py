from setuptools import setup, find_packages

setup(
    name="org_directory",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2",
        "requests",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "org-directory=org_directory.cli.main:main",
        ],
    },
    python_requires=">=3.10",
)
