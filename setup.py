
from setuptools import setup, find_namespace_packages

# The package is a namespace package under src/ (there are no __init__.py files),
# so the packages must be discovered explicitly.
setup(
    name = 'DssHeader',
    version = '0.1.0',
    description = 'Reads the headers of Olympus DSS (Digital Speech Standard) dictation files.',
    package_dir = {'': 'src'},
    packages = find_namespace_packages(where = 'src'),
    python_requires = '>=3.8',
    install_requires = [
        'asset_extraction_framework',
        'termcolor',
    ],
    extras_require = {
        'test': ['pytest'],
    },
    entry_points = {
        'console_scripts': [
            'DssHeader = Dss.Engine:main',
            'DssDump = Dss.Dump:main',
        ],
    })
