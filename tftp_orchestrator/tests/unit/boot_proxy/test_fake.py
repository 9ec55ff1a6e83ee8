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

import inspect

from tftp_orchestrator.boot_proxy import base as base_class
from tftp_orchestrator.boot_proxy import fake
from tftp_orchestrator.boot_proxy import http
from tftp_orchestrator.common import boot_loaders
from tftp_orchestrator.tests import base

MAC = '52:54:00:12:34:56'


class FakeBootProxyTestCase(base.TestCase):

    def setUp(self):
        super(FakeBootProxyTestCase, self).setUp()
        self.client = fake.FakeBootProxy('https://proxy1', name='proxy1')

    def test_publish_and_remove(self):
        self.client.publish(boot_loaders.BootLoaderKind.PXELINUX, MAC, 'a')
        self.client.publish('PXELinux', MAC, 'b')
        self.assertEqual({('PXELinux', MAC): 'b'}, self.client.configs)
        self.client.remove(boot_loaders.BootLoaderKind.PXELINUX, MAC)
        self.assertEqual({}, self.client.configs)

    def test_remove_missing(self):
        self.client.remove('PXEGrub', MAC)
        self.assertEqual({}, self.client.configs)

    def test_fetch_boot_file(self):
        self.client.fetch_boot_file('boot/x', 'http://mirror/vmlinuz')
        self.assertEqual([('boot/x', 'http://mirror/vmlinuz')],
                         self.client.boot_files)

    def test_defaults(self):
        client = fake.FakeBootProxy('https://proxy2')
        self.assertEqual('https://proxy2', client.name)
        self.assertEqual('https://proxy2', str(client))


class CompareBasetoModules(base.TestCase):

    def test_drivers_match_boot_proxy_base(self):
        signature_method = inspect.signature

        def _get_public_apis(cls):
            methods = {}
            for (name, value) in inspect.getmembers(cls,
                                                    inspect.isfunction):
                if name.startswith("_"):
                    continue
                methods[name] = value
            return methods

        def _compare_classes(baseclass, driverclass):
            basemethods = _get_public_apis(baseclass)
            implmethods = _get_public_apis(driverclass)

            for name in basemethods:
                baseargs = signature_method(basemethods[name])
                implargs = signature_method(implmethods[name])
                self.assertEqual(
                    baseargs,
                    implargs,
                    "%s args of %s don't match base %s" % (
                        name,
                        driverclass,
                        baseclass)
                )

        _compare_classes(base_class.BaseBootProxy, fake.FakeBootProxy)
        _compare_classes(base_class.BaseBootProxy, http.HTTPBootProxy)

        for driverclass in (base_class.BaseBootProxy, fake.FakeBootProxy,
                            http.HTTPBootProxy):
            self.assertEqual({'publish', 'remove', 'fetch_boot_file'},
                             set(_get_public_apis(driverclass)))
