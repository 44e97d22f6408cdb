# Don't import __future__ packages here; they make setup fail

from setuptools import setup

with open("README.pypi.rst") as readmeFile:
    long_description = readmeFile.read()

install_requires = []
with open("requirements.txt") as requirementsFile:
    for line in requirementsFile:
        line = line.strip()
        if len(line) == 0:
            continue
        if line[0] == '#':
            continue
        pinnedVersion = line.split()[0]
        install_requires.append(pinnedVersion)

version = {}
with open("ga4gh/cts/_version.py") as versionFile:
    exec(versionFile.read(), version)

setup(
    name="ga4gh-cts",
    description="A compliance test suite for servers of the GA4GH API",
    packages=["ga4gh", "ga4gh.cts", "ga4gh.cts.cli",
              "ga4gh.cts.compliance"],
    zip_safe=False,
    url="https://github.com/ga4gh/compliance",
    version=version["version"],
    entry_points={
        'console_scripts': [
            'ga4gh_cts=ga4gh.cts.cli.cts:cts_main',
        ]
    },
    long_description=long_description,
    install_requires=install_requires,
    extras_require={
        'test': ['pytest>=7.0', 'werkzeug>=2.0', 'mock>=4.0'],
    },
    python_requires='>=3.8',
    license='Apache License 2.0',
    include_package_data=True,
    author="Global Alliance for Genomics and Health",
    author_email="theglobalalliance@genomicsandhealth.org",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: Apache Software License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
        'Topic :: Software Development :: Testing',
    ],
    keywords=['genomics', 'compliance'],
)
