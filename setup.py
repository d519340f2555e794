from setuptools import setup, find_packages
import re

# Read version from pph21/__init__.py
with open('pph21/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='pph21',
    version=version,
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'pph21': ['tax_rules/*.yaml'],
    },
    install_requires=[
        'PyYAML>=6.0',
        'pydantic>=2.0.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    description='Indonesian PPh 21 income tax rates, PTKP and calculators.',
    python_requires='>=3.10',
)
