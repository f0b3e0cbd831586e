from setuptools import setup, find_packages
setup(
    name='webpack-config',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    include_package_data=True,
    package_data={
        'webpack_config': [
            'config/*.ini',
        ],
    },
    description='Generate webpack configuration with sensible, overridable defaults.',
    author='Your Name',
    author_email='youremail@example.com',
    python_requires='>=3.8',
    install_requires=[
        'invoke>=2.0.0',
        'pyyaml>=6.0',
        'pydantic>=2.5.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'webpack-config = webpack_config.tasks:program.run',
        ],
    },
)
