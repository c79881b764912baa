#!/usr/bin/env python3

from setuptools import setup

setup(
    name='passgen',
    version='0.1.0',
    description='Random password generator with strength scoring',
    packages=['passgen', 'passgen.backend'],
    python_requires='>=3.8',
    install_requires=[
        'prompt_toolkit',
        'blessed',
        'pyperclip',
    ],
    extras_require={
        'pynacl': ['pynacl'],
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['passgen = passgen.main:main'],
    },
)
