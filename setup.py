from setuptools import setup, find_packages

import re
import os

this_directory = os.path.abspath(os.path.dirname(__file__))
__version__ = re.findall(
    r"""__version__ = ["']+([0-9\.]*)["']+""",
    open(os.path.join(this_directory, "diffinterp/version.py")).read(),
)[0]

with open(os.path.join(this_directory, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="diffinterp",
    version=__version__,
    description="""diffinterp interpolates tabulated data with Newton's central-difference
    formula from three or five tabular values, locating extrema and zeros of the
    interpolating polynomial, and with Lagrange's formula for unequally spaced tables.""",
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords="interpolation central differences lagrange ephemeris numerical",
    author="",
    author_email="",
    license="BSD 3-Clause License",
    packages=find_packages(
        where='./',
        include=['diffinterp*'],
        exclude=['tests']
        ),
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "configobj",
        "colorama",
    ],
    extras_require={
        "test": [
            "pytest",
            "scipy",
        ],
        "all": [
            "pytest",
            "scipy",
        ],
    },
    classifiers=[
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        ],
)
