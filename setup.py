#!/usr/bin/env python3

import sys

from setuptools import setup

if sys.version_info[0] < 3:
    sys.exit("Python 3.x is required; you are using %s" % sys.version)

setup(
    name="distle",
    version="0.1",
    description=("Play Distle, a word-guessing game scored by edit distance, or let the computer play it"),
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='GPL v3 or later',
    install_requires=open('requirements.txt').readlines(),
    extras_require={
        'unidecode': ['unidecode'],
        'test': open('requirements-test.txt').readlines(),
    },
    packages=["distle"],
    entry_points={'console_scripts': ['distle=distle.__main__:main']},
    classifiers=[
        'Environment :: Console',
        'Topic :: Games/Entertainment :: Puzzle Games',
        'Operating System :: POSIX',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
    ],
)
