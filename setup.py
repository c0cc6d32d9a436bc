# -*- coding: utf-8 -*-
"""
ttl2jsonld
==========

ttl2jsonld_ converts RDF Turtle files to JSON-LD_, optionally compacted
against a context and framed against a frame.

.. _ttl2jsonld: http://github.com/ttl2jsonld/ttl2jsonld
.. _JSON-LD: http://json-ld.org/
"""

from setuptools import setup
import os

# get meta data
about = {}
with open(os.path.join(
        os.path.dirname(__file__), 'lib', 'ttl2jsonld', '__about__.py')) as fp:
    exec(fp.read(), about)

with open(os.path.join(os.path.dirname(__file__), 'README.rst')) as fp:
    long_description = fp.read()

setup(
    name='ttl2jsonld',
    version=about['__version__'],
    description='Convert RDF Turtle files to framed JSON-LD',
    long_description=long_description,
    long_description_content_type='text/x-rst',
    url='http://github.com/ttl2jsonld/ttl2jsonld',
    packages=['ttl2jsonld', 'ttl2jsonld.documentloader'],
    package_dir={'': 'lib'},
    license='BSD 3-Clause license',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Internet',
        'Topic :: Software Development :: Libraries',
    ],
    python_requires='>=3.8',
    install_requires=[
        'PyLD>=2,<3',
        'rdflib',
        'requests',
    ],
    extras_require={
        'aiohttp': ['aiohttp'],
        'tests': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'ttl2jsonld = ttl2jsonld.cli:main',
        ],
    },
)
