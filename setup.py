#!/usr/bin/env python

from setuptools import setup, find_packages

with open('skmob/__init__.py') as fid:
    for line in fid:
        if line.startswith('__version__'):
            VERSION = line.strip().split()[-1][1:-1]
            break

LONG_DESCRIPTION = """
	scikit-mobius composes Möbius transformations of the extended complex plane and relates them to stereographic projections of the sphere.
"""
setup(name='scikit-mobius',
	version=VERSION,
	license='new BSD',
	description='Object Oriented Möbius Transformations',
	long_description=LONG_DESCRIPTION,
	packages=find_packages(include=['skmob', 'skmob.*']),
	python_requires='>=3.9',
	install_requires = [
		'numpy',
		'scipy',
		],
	extras_require = {
		'test': ['pytest'],
		},
	package_dir={'skmob':'skmob'},
	include_package_data = True,
	)
