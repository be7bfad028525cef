from __future__ import annotations

from setuptools import find_packages, setup

setup(
    name="pyutm33",
    version="0.1.0",
    description="Kartverket UTM33 to latitude/longitude conversion by quadratic interpolation",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"utm33": ["data/*.csv"]},
    include_package_data=True,
    install_requires=["numpy"],
    extras_require={
        "numba": ["numba"],
        "test": ["pytest"],
    },
)
