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


def _read_base_version() -> str:
    # databuilder/version.py can't be imported here, its dependencies may not be installed yet
    version_file = Path(__file__).parent / 'databuilder' / 'version.py'
    match = re.search(r"^BASE_VERSION = '([^']+)'", version_file.read_text(), re.MULTILINE)
    assert match is not None, 'BASE_VERSION not found'
    return match.group(1)


setup(
    name='databuilder',
    version=_read_base_version(),
    description='Fluent builder for small binary data samples',
    author='Hathor Team',
    author_email='contact@hathor.network',
    license='Apache License 2.0',
    python_requires='>=3.10',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    packages=find_packages(exclude=('tests', 'tests.*')),
    install_requires=[
        'pydantic>=2.0',
        'PyYAML>=6.0',
        'structlog>=22.0',
        'typing_extensions>=4.6',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
)
