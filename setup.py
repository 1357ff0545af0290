import setuptools

setuptools.setup(
    name='lrbind',
    version='0.1',
    license='MIT',
    zip_safe=False,
    packages=setuptools.find_packages(include=['lrbind', 'lrbind.*']),
    package_data={'lrbind.params_tests': ['data/*.lua']},
    python_requires='>=3.8',
    install_requires=[
        'pyyaml', 'rich', 'rapidfuzz', 'fastjsonschema'
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['lrbind=lrbind.main:main'],
    },
    description='Generates the develop-parameter bindings of a Lightroom plug-in settings table from a validated parameter registry.',
)
