# Copyright 2011 OpenStack Foundation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os

import setuptools


def parse_requirements(filename):
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), filename)
    with open(path) as f:
        return [line.strip() for line in f
                if line.strip() and not line.startswith('#')]


Name = 'quotaconf'
Url = "https://opendev.org/openstack/quotaconf"
Version = '1.0.0'
License = 'Apache License 2.0'
Author = 'OpenStack'
AuthorEmail = 'openstack-discuss@lists.openstack.org'
Summary = 'Render networking service quota settings into the QUOTAS section'
ShortDescription = Summary
Description = Summary


setuptools.setup(
    name=Name,
    version=Version,
    url=Url,
    author=Author,
    author_email=AuthorEmail,
    description=ShortDescription,
    long_description=Description,
    license=License,
    classifiers=[
        'Environment :: OpenStack',
        'Intended Audience :: System Administrators',
        'Intended Audience :: Information Technology',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
    python_requires='>=3.9',
    install_requires=parse_requirements('requirements.txt'),
    extras_require={'test': parse_requirements('test-requirements.txt')},
    packages=setuptools.find_packages('.', include=['quotaconf',
                                                     'quotaconf.*']),
    entry_points={
        'oslo.config.opts': ['quotaconf = quotaconf.opts:list_opts'],
    },
)
