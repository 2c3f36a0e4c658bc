from setuptools import setup
from setuptools import find_packages

long_description = open('README.md').read()

setup(
    name="buildit",
    version='1.0.0',
    description="Fluent builder for HTTP request descriptors",
    python_requires='>=3.8',
    install_requires=[
        'dnspython',
    ],
    extras_require={
        'tests': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'buildit=buildit.cli:main',
        ],
    },
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={'buildit': ['*.ini']},
    long_description=long_description,
    long_description_content_type='text/markdown'
)
