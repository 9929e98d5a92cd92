from pathlib import Path
from setuptools import setup, find_packages

projdir = Path(__file__).parent
readme = (projdir / 'README.md').read_text()

setup(
    name='urigrammar',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    python_requires='>=3.7',
    description='RFC 3986 URI validation and decomposition, built from pattern combinators',
    license='MIT',
    install_requires=['termcolor'],
    extras_require={
        'dev': ['pytest', 'mypy'],
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['urigrammar=urigrammar.cli:main']
    },
    long_description=readme,
    long_description_content_type='text/markdown',
)
