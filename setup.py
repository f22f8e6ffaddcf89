import os

from setuptools import find_packages, setup

_MLFLOW_CLIENT_DIR = os.path.dirname(os.path.abspath(__file__))


def _get_version() -> str:
    version = {}
    with open(os.path.join(_MLFLOW_CLIENT_DIR, "mlflow_client", "version.py")) as f:
        exec(f.read(), version)
    return version["VERSION"]


setup(
    name="mlflow-client",
    version=_get_version(),
    description="Synchronous Python client for the MLflow Tracking REST API",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "requests>=2.17.3,<3",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    license="Apache-2.0",
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3",
    ],
)
