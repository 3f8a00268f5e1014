"""Per-module and per-target log severity thresholds, configured with
compact command-line specifications like ``-d net:D,db:W -v audit:E``.
Small, pure, and thread-safe.

BSD-licensed.
"""

from setuptools import setup, find_packages


__author__ = 'Mahmoud Hashemi'
__version__ = '0.1.0'
__contact__ = 'mahmoud@hatnote.com'
__url__ = 'https://github.com/mahmoud/thresher'
__license__ = 'BSD'

desc = ('Per-module and per-target log severity thresholds.'
        ' Very lightweight, very Pythonic.')


setup(name='thresher',
      version=__version__,
      description=desc,
      long_description=__doc__,
      author=__author__,
      author_email=__contact__,
      url=__url__,
      packages=find_packages(),
      install_requires=['boltons>=20.0.0'],
      extras_require={'test': ['pytest']},
      python_requires='>=3.7',
      include_package_data=True,
      zip_safe=False,
      license=__license__,
      platforms='any',
      classifiers=[
          'Intended Audience :: Developers',
          'Topic :: System :: Logging',
          'Topic :: Utilities',
          'License :: OSI Approved :: BSD License',
          'Programming Language :: Python :: 3',
          'Programming Language :: Python :: Implementation :: CPython',
          'Programming Language :: Python :: Implementation :: PyPy',
      ]
)


"""
A brief checklist for release:

* pytest
* git commit (if applicable)
* Bump setup.py version off of -dev
* git commit -a -m "bump version for x.y.z release"
* python -m build && twine upload dist/*
* git tag -a x.y.z -m "brief summary"
* write CHANGELOG
* bump setup.py version onto n+1 dev
* git commit
* git push

"""
