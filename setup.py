from setuptools import find_packages, setup

setup(
    name="splitnet",
    version="0.1.0",
    description=(
        "Non-negative least squares estimation of circular split weights "
        "for NeighborNet split networks"
    ),
    long_description=open("README.rst").read(),
    long_description_content_type="text/x-rst",
    author="The Splitnet contributors",
    license="BSD-3-Clause",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: BSD License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
    package_dir={"": "src"},
    packages=find_packages("src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy >= 1.25",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-codspeed",
        ],
    },
)
