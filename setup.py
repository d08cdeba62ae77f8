import io
from setuptools import setup, find_packages


def read_file(filename, **kwargs):
    encoding = kwargs.get("encoding", "utf-8")

    with io.open(filename, encoding=encoding) as f:
        return f.read()

with open("gridplace/version.py", "r") as f:
    exec(f.read())

setup(
    name="gridplace",
    version=__version__,
    packages=find_packages(exclude=["tests", "tests.*"]),

    # Metadata for PyPi
    author="The gridplace Authors",
    description="Simulated annealing placement of cells onto a grid",
    long_description=read_file("README.rst"),
    license="GPLv2",
    classifiers=[
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",

        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",

        "Operating System :: POSIX :: Linux",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: MacOS",

        "Programming Language :: Python :: 3",

        "Topic :: Scientific/Engineering :: "
        "Electronic Design Automation (EDA)",
    ],
    keywords="placement simulated-annealing wirelength",

    # Requirements
    install_requires=["numpy>1.6"],
    extras_require={
        "tests": ["pytest", "mock"],
    },

    # Scripts
    entry_points={
        "console_scripts": [
            "gridplace-anneal = gridplace.scripts.gridplace_anneal:main",
        ],
    }
)
