"""Setup script for seqfold."""
import runpy

from setuptools import setup, find_packages  # type: ignore

version = runpy.run_path('seqfold/_version.py')['version']

test_requirements = [
    'coverage>=6.4.4',
    'hypothesis>=6',
    'pytest>=7',
]

setup(
    name='seqfold',
    version=version,
    description='Generic sequence combinators derived from a single left fold',  # noqa
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    keywords='fold combinators functional',
    packages=find_packages(),  # type: ignore
    python_requires='>=3.8',
    install_requires=[
        'typing-extensions>=4',
    ],
    tests_require=test_requirements,
    extras_require={
        'test': test_requirements,
        'dev': ['axblack==20220330', 'mypy>=1.1.1', 'pre-commit>=2.6.0,<3'],
    },
)
