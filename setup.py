from setuptools import setup

setup(
    name='minievm',
    version='0.1.0',
    description='Minimal 256-bit stack machine bytecode interpreter',
    author='minievm contributors',
    package_dir={'': 'src'},
    packages=['minievm', 'minievm.vm', 'minievm.cli'],
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
            'minievm = minievm.cli.main:cli'
        ]
    },
    classifiers=[
        'Programming Language :: Python :: 3',
    ],
)
