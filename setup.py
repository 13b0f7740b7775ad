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
from pathlib import Path

from setuptools import find_packages, setup

# importing nbtree would require its dependencies to be installed already
_version_file = Path(__file__).parent / 'nbtree' / 'version.py'
__version__ = re.search(r"^__version__ = '([^']+)'", _version_file.read_text(), re.MULTILINE).group(1)

setup(
    name='nbtree',
    version=__version__,
    description='Reader and writer of NBT (named binary tree) data',
    author='Hathor Team',
    author_email='contact@hathor.network',
    license='Apache-2.0',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(include=('nbtree', 'nbtree.*')),
    package_data={'nbtree.conf': ['*.yml']},
    install_requires=[
        'structlog',
        'pydantic>=2',
        'PyYAML',
        'typing_extensions',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
