"""Setup script for sigma-protocol-standard package."""

from setuptools import setup, find_packages

setup(
    name="sigma-protocol-standard",
    use_scm_version={"fallback_version": "0.1.0"},
    setup_requires=['setuptools_scm'],
    description="Sigma protocols and their Fiat-Shamir transform in pure Python",
    packages=find_packages(),
    include_package_data=True,
    python_requires=">=3.8",
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
