from setuptools import setup, find_packages

setup(
    name='keygroup',
    version='0.1.0',
    description='Partition collections into groups of caller-chosen containers.',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click',
        'pydantic>=2',
        'pydantic-settings',
        'pyyaml',
        'rich',
        'rich-click',
        'tqdm',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'keygroup = keygroup.cli:app',
        ],
    },
)
