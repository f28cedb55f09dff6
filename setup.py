from setuptools import setup
from setuptools import find_packages

PACKAGE_NAME = "pyflat"
VERSION_MINOR = 1
VERSION_MAJOR = 0

setup(
    name=PACKAGE_NAME,
    version=f"{VERSION_MAJOR}.{VERSION_MINOR}",
    packages=find_packages(
        where="src",
    ),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "pydantic>=2",
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    author="Stepan Dyatkovskiy",
    author_email="ml@dyatkovskiy.com",
    description="Generic 2D point and vector value types.",
    license="GPL3",
    keywords="python geometry point vector 2d",
)
