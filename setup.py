from setuptools import find_packages, setup


setup(
    name = 'xassert',
    version = '0.1.0',
    description = 'Fluent assertions that report where nested values fail',
    license = 'MIT',
    packages = find_packages(include=['xassert', 'xassert.*']),
    python_requires = '>=3.8',
    install_requires = [
        'startup',
    ],
)
