#!/usr/bin/env python
"""Python rotation matrices in two and three dimensions

Rotation matrices for SO(2) and SO(3) built on Casadi dense matrices,
with constructors from angles, axes, euler angles and observer frames,
and explicit handling of the degenerate angle 0 and pi configurations.
"""

from setuptools import setup, find_packages
import sys

if sys.version_info < (3, 5):
    raise SystemExit("requires  Python >= 3.5")

DOCLINES = __doc__.split("\n")

CLASSIFIERS = """\
Development Status :: 1 - Planning
Intended Audience :: Science/Research
Intended Audience :: Developers
License :: OSI Approved :: BSD License
Programming Language :: Python
Programming Language :: Python :: 3
Topic :: Software Development
Topic :: Scientific/Engineering :: Mathematics
Topic :: Scientific/Engineering :: Physics
Operating System :: Microsoft :: Windows
Operating System :: POSIX
Operating System :: Unix
Operating System :: MacOS
"""

# pylint: disable=invalid-name

package_name = "pyrot"

setup(
    name=package_name,
    description=DOCLINES[0],
    long_description="\n".join(DOCLINES[2:]),
    license="BSD 3-Clause",
    classifiers=[_f for _f in CLASSIFIERS.split("\n") if _f],
    platforms=["Windows", "Linux", "Solaris", "Mac OS-X", "Unix"],
    install_requires=[
        "numpy",
        "casadi",
    ],
    extras_require={
        "test": ["pytest", "hypothesis", "scipy"],
    },
    packages=find_packages(include=[package_name, package_name + ".*"]),
    version="0.1.0",
    zip_safe=True,
)
