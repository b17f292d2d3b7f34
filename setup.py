#!/usr/bin/env python

from setuptools import setup
from pdfwrite import __version__ as version

with open('README.rst') as f:
    long_description = f.read()

setup(
    name='pdfwrite',
    version=version,
    description='Typed PDF object writer',
    long_description=long_description,
    author='pdfwrite authors',
    platforms='Independent',
    packages=['pdfwrite', 'pdfwrite.objects'],
    python_requires='>=3.6',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
        'Topic :: Printing',
    ],
    keywords='pdf writer objects serialization',
)
