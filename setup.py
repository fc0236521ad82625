"""
Setup script for netshare
"""

from setuptools import setup, find_packages

with open('README.md', 'r') as f:
    long_description = f.read()

setup(
    name='netshare-driver',
    version='1.0.0',
    description='netshare - metadata and reference-count core of a network-share volume plugin',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='Apache License 2.0',

    packages=find_packages(exclude=['tests', 'tests.*']),

    install_requires=[
        'click>=8.1.3',
        'tabulate>=0.9.0',
        'python-json-logger>=3.1.0',
    ],

    extras_require={
        'dev': [
            'pytest>=7.4.0',
            'pytest-cov>=4.1.0',
            'pytest-mock>=3.11.1',
            'flake8>=6.1.0',
        ],
    },

    entry_points={
        'console_scripts': [
            'netshare-meta=netshare.cli.main:main',
        ],
    },

    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: System :: Filesystems',
        'Topic :: System :: Systems Administration',
    ],

    python_requires='>=3.8',
    zip_safe=False,

    keywords='docker volume plugin nfs cifs mount netshare',
)
