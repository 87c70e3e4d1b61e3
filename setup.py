'''
Created on Oct 18, 2026

'''

from setuptools import setup, find_packages

if __name__ == '__main__':

    packages = find_packages(exclude=['test', 'test.*'])

    install_requires = ["numpy>=1.22"]

    extras_require = {'test': ["hypothesis>=6.0",
                               "pytest>=7.0"]}

    classifiers = ['Programming Language :: Python :: 3.10',
                   'Topic :: Scientific/Engineering']

    setup(name='raster_blocks',
          zip_safe=False,
          classifiers=classifiers,
          version='1.0.0',
          description="Immutable integer row/column block rectangles for indexing raster grids",
          packages=packages,
          python_requires='>=3.10',
          test_suite='test',
          install_requires=install_requires,
          extras_require=extras_require)
