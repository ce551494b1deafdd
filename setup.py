"""
vcardx: module for reading and writing vCard files

Description
-----------

Parses vCard 2.1, 3.0 and 4.0 files into Python data structures, decoding
folded lines, quoted-printable values and escaped text. Also serializes
those data structures to any of the three vCard versions.

Requirements
------------

Requires python 3.8 or later and dateutil 2.7.0 or later.

Recent changes
--------------
    - First release: typed properties, per-version reading and writing,
      scribes for custom properties
"""

from setuptools import find_packages, setup

doclines = (__doc__ or "").splitlines()

setup(
    name="vcardx",
    version="0.1.0",
    license="Apache",
    zip_safe=True,
    include_package_data=True,
    install_requires=[
        "python-dateutil >= 2.5.0; python_version < '3.10'",
        "python-dateutil >= 2.7.0; python_version >= '3.10'",
    ],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.8",
    platforms=["any"],
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="A Python package for parsing and creating vCard 2.1, 3.0 and 4.0 files",
    long_description="\n".join(doclines[2:]),
    keywords=["vcard", "vcf", "contacts"],
    classifiers="""
      Development Status :: 3 - Alpha
      Environment :: Console
      Intended Audience :: Developers
      License :: OSI Approved :: Apache Software License
      Natural Language :: English
      Operating System :: OS Independent
      Programming Language :: Python
      Programming Language :: Python :: 3
      Topic :: Text Processing""".strip().splitlines(),
)
