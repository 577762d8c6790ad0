from setuptools import setup

setup(
    name='richacl',
    version='0.1.0',
    description='Text codec for rich (NFSv4-style) access control lists',
    license='LGPL-3.0-or-later',
    python_requires='>=3.10',
    packages=['richacl'],
    package_data={
        'richacl': ['py.typed'],
    },
    extras_require={
        'test': ['pytest'],
    },
)
