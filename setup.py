from setuptools import setup, find_packages

setup(
    name='funcotator-datasources',
    version='0.1.0',
    description='Data source downloader for Funcotator',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    package_data={'funcotator_datasources.data': ['*.ini']},
    include_package_data=True,
    install_requires=[
        'click',
        'requests',
        'google-cloud-storage',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'funcotator-datasources=funcotator_datasources.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.9',
)
