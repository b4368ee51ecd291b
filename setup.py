from setuptools import setup, find_packages

setup(
    name="array2d",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "*.tests", "*.tests.*"]),
    package_data={"array2d": ["configs/*.yaml"]},
    install_requires=[
        "numpy",
        "PyYAML",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
