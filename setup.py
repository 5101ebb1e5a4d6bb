from setuptools import setup

setup(
    name='jyrolint',
    version='0.1.0',
    description='Fast line-oriented static analysis for Jyro scripts',
    author='Jyro tooling contributors',
    package_dir={'jyrolint': 'src/jyrolint'},
    packages=['jyrolint', 'jyrolint.cli'],
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=7.0',
        'rich>=9.0'
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'jyrolint = jyrolint.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
