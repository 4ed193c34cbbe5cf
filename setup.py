#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re

from setuptools import find_packages, setup

# XXX: importing micheline would import its dependencies, which might not be installed yet
with open('micheline/version.py') as fp:
    __version__ = re.search(r"^BASE_VERSION = '([^']+)'", fp.read(), re.MULTILINE).group(1)  # type: ignore[union-attr]

setup(
    name='micheline',
    version=__version__,
    description='Binary codec for Micheline trees',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License 2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.10',
    packages=find_packages(exclude=('tests', 'tests.*')),
    install_requires=[
        'pydantic>=2.0,<3',
        'PyYAML>=6.0',
        'structlog>=22.3',
        'typing_extensions>=4.4',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
)
