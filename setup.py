#    Copyright 2014 Red Hat, Inc.
#
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.

import os
import os.path

from setuptools import find_packages
from setuptools import setup

name = 'staypuft'
version = '0.5.0'


def find_requires(filename='requirements.txt'):
    dir_path = os.path.dirname(os.path.realpath(__file__))
    with open(os.path.join(dir_path, filename), 'r') as reqs:
        return [line.strip() for line in reqs
                if line.strip() and not line.startswith('#')]


if __name__ == "__main__":
    setup(
        name=name,
        version=version,
        description='Staypuft network role resolution',
        long_description="""Resolves per-host network bindings, gateways
        and virtual IPs for OpenStack deployments.""",
        classifiers=[
            "Development Status :: 4 - Beta",
            "Programming Language :: Python",
            "Programming Language :: Python :: 3",
        ],
        author='Red Hat, Inc.',
        url='https://github.com/theforeman/staypuft',
        keywords='openstack deployment network staypuft',
        packages=find_packages(),
        zip_safe=False,
        install_requires=find_requires(),
        extras_require={'test': find_requires('test-requirements.txt')},
        include_package_data=True,
        package_data={'staypuft': ['settings.yaml']},
        entry_points={
            'console_scripts': [
                'staypuft-query = staypuft.cli:main',
            ],
        },
    )
