from setuptools import find_packages, setup


if __name__ == '__main__':
    import sys
    import re
    if sys.version_info < (3, 8):
        sys.exit('Sorry, Python < 3.8 is not supported,'
                 + ' please update to install.')
    else:
        # load version number from file in sources dir without importing
        with open('urinorm/version.py') as vfobj:
            vstring = str(vfobj.read())
            version = re.search(r"(\d+\.\d+\.\d+)", vstring)[0]

        with open('README.rst') as rfobj:
            long_description = rfobj.read()

        setup(
            name='urinorm',
            version=version,
            description='Syntax-based URI normalization according to '
                        'RFC 3986',
            long_description=long_description,
            long_description_content_type='text/x-rst',
            license='MIT',
            python_requires='>=3.8',
            packages=find_packages(include=['urinorm', 'urinorm.*']),
            install_requires=[
                'url-normalize>=3.0',
            ],
            extras_require={
                'test': [
                    'pytest>=7.0',
                ],
            },
            classifiers=[
                'Programming Language :: Python :: 3',
                'License :: OSI Approved :: MIT License',
                'Operating System :: OS Independent',
                'Topic :: Internet :: WWW/HTTP',
            ],
        )
