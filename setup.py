from setuptools import setup, find_packages

setup(
    name="pid-ball",
    version="0.1.0",
    license="AGPL-3.0-or-later",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click>=8.1",
        "numpy",
        "pandas>=1.5",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "pid-ball=pid_ball.cli:main",
        ],
    },
)
