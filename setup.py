"""
Setup script for installing the Forvo Downloader command-line tool.
"""

from setuptools import setup, find_packages

setup(
    name='forvo-downloader',
    version='1.0.0',
    description='Download the top rated Forvo pronunciation for every word in a word list',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.8',
    install_requires=[
        'requests>=2.27',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'forvo-downloader=forvo_downloader.main:main',
        ],
    },
)
