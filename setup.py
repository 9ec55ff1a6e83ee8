#!/usr/bin/env python
# Copyright (c) 2013 Hewlett-Packard Development Company, L.P.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or
# implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import setuptools

project = 'tftp-orchestrator'

setuptools.setup(
    name=project,
    version='1.0.0',
    description='TFTP network boot configuration orchestration',
    classifiers=[
        'Environment :: OpenStack',
        'Intended Audience :: Information Technology',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        ],
    python_requires='>=3.9',
    packages=setuptools.find_packages(exclude=['*.tests', '*.tests.*']),
    package_data={'tftp_orchestrator': ['templates/*.template']},
    include_package_data=True,
    install_requires=[
        'oslo.concurrency>=4.5.0',
        'oslo.config>=9.0.0',
        'oslo.i18n>=5.1.0',
        'oslo.log>=5.0.0',
        'oslo.serialization>=4.3.0',
        'oslo.utils>=6.0.0',
        'oslo.versionedobjects>=3.1.0',
        'Jinja2>=3.0.0',
        'requests>=2.25.0',
        'stevedore>=3.5.0',
        'tenacity>=8.0.0',
    ],
    extras_require={
        'test': [
            'fixtures>=3.0.0',
            'oslotest>=4.5.0',
            'stestr>=3.2.0',
            'testtools>=2.5.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'tftp-orchestrator = tftp_orchestrator.cmd.manage:main',
        ],
        'tftp_orchestrator.boot_proxy': [
            'http = tftp_orchestrator.boot_proxy.http:HTTPBootProxy',
            'fake = tftp_orchestrator.boot_proxy.fake:FakeBootProxy',
        ],
        'oslo.config.opts': [
            'tftp_orchestrator = tftp_orchestrator.conf.opts:list_opts',
        ],
        'oslo.config.opts.defaults': [
            'tftp_orchestrator = '
            'tftp_orchestrator.conf.opts:update_opt_defaults',
        ],
    },
)
