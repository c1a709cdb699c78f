# SPDX-FileCopyrightText: 2026 azurefuncs contributors
# SPDX-License-Identifier: Apache-2.0

import io
import os

import setuptools

NAME = 'azurefuncs'
SHORT_DESCRIPTION = 'Custom handler functions with a Go version select service'
LICENSE = 'Apache License 2.0'
URL = 'https://github.com/willabides/azurefuncs'
REQUIRES = [
    'click',
    'colorama',
    'flask',
    'pydantic>=2',
    'pydantic-settings',
    'requests<3',
    'requests-file',
    'semantic_version>=2.8',
]
TEST_REQUIRES = [
    'pytest',
    'requests-mock',
]

info = {}  # type: ignore
path = os.path.abspath(os.path.dirname(__file__))

with io.open('README.md', mode='r', encoding='utf-8') as readme:
    LONG_DESCRIPTION = readme.read()

with io.open(
    os.path.join(path, 'azurefuncs_tools', '__version__.py'), mode='r', encoding='utf-8'
) as f:
    exec(f.read(), info)  # nosec

setuptools.setup(
    name=NAME,
    description=SHORT_DESCRIPTION,
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    license=LICENSE,
    version=info['__version__'],
    url=URL,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: Implementation :: CPython',
    ],
    packages=setuptools.find_packages(
        include=('azurefuncs', 'azurefuncs.*', 'azurefuncs_tools', 'azurefuncs_tools.*')
    ),
    scripts=[],
    install_requires=REQUIRES,
    extras_require={'test': TEST_REQUIRES},
    python_requires='>=3.8',
    include_package_data=True,
    entry_points={
        'console_scripts': [
            'azurefuncs = azurefuncs.cli:safe_cli',
        ],
    },
)
