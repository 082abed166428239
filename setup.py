from setuptools import setup, find_packages


setup(
    name='manifest-validator',
    version='1.0',
    description='Validates open web app manifests.',
    long_description=open('README.rst').read(),
    license='BSD',
    packages=find_packages(exclude=['tests',
                                    'tests/*']),
    package_data={'manifestvalidator': ['rules/*.json']},
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    install_requires=[p.strip() for p in open('./requirements.txt')
                      if p.strip() and not p.startswith(('#', '-e'))],
    extras_require={
        'test': ['pytest', 'mock'],
    },
    scripts=["manifest-validator"],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ]
)
