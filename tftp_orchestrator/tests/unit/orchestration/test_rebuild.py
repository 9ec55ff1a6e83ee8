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

from unittest import mock

from tftp_orchestrator.common import boot_loaders
from tftp_orchestrator.common import exception
from tftp_orchestrator.orchestration import deployment
from tftp_orchestrator.orchestration import rebuild
from tftp_orchestrator.orchestration import templates
from tftp_orchestrator.tests import base
from tftp_orchestrator.tests.unit import utils


class RebuildTestCase(base.TestCase):

    def setUp(self):
        super(RebuildTestCase, self).setUp()
        self.deployer = mock.create_autospec(deployment.TFTPDeployer,
                                             instance=True)
        self.deployer.publish.side_effect = (
            lambda host, nic, kind: deployment.DeploymentResult(kind))
        self.nic = utils.get_test_nic()
        self.host = utils.get_test_host(interfaces=[self.nic])

    def test_rebuild_all_kinds(self):
        self.assertTrue(rebuild.rebuild_tftp(self.deployer, self.host,
                                             self.nic))
        self.assertEqual(
            [mock.call(self.host, self.nic, kind)
             for kind in boot_loaders.ALL],
            self.deployer.publish.call_args_list)

    def test_rebuild_one_kind_raises(self):
        def _publish(host, nic, kind):
            if kind == boot_loaders.BootLoaderKind.PXEGRUB:
                raise exception.BootProxyError(proxy='proxy1',
                                               operation='publish',
                                               reason='down')
            return deployment.DeploymentResult(kind)

        self.deployer.publish.side_effect = _publish
        self.assertFalse(rebuild.rebuild_tftp(self.deployer, self.host,
                                              self.nic))
        self.assertEqual(3, self.deployer.publish.call_count)

    def test_rebuild_partial_failure(self):
        error = exception.BootProxyError(proxy='proxy1', operation='publish',
                                         reason='down')

        def _publish(host, nic, kind):
            if kind == boot_loaders.BootLoaderKind.PXELINUX:
                return deployment.DeploymentResult(
                    kind, targets=[None, None], failures=[(None, error)])
            return deployment.DeploymentResult(kind)

        self.deployer.publish.side_effect = _publish
        self.assertFalse(rebuild.rebuild_tftp(self.deployer, self.host,
                                              self.nic))
        self.assertEqual(3, self.deployer.publish.call_count)

    def test_rebuild_unexpected_error(self):
        self.deployer.publish.side_effect = RuntimeError('boom')
        self.assertFalse(rebuild.rebuild_tftp(self.deployer, self.host,
                                              self.nic))
        self.assertEqual(3, self.deployer.publish.call_count)

    def test_rebuild_skipped_kind_is_success(self):
        self.deployer.publish.side_effect = (
            lambda host, nic, kind: deployment.DeploymentResult(
                kind, skipped=True))
        self.assertTrue(rebuild.rebuild_tftp(self.deployer, self.host,
                                             self.nic))

    def test_rebuild_not_applicable(self):
        nic = utils.get_test_nic(subnet=None)
        host = utils.get_test_host(interfaces=[nic])
        self.assertTrue(rebuild.rebuild_tftp(self.deployer, host, nic))
        self.assertFalse(self.deployer.publish.called)


class RebuildProxyClientTestCase(base.TestCase):

    def setUp(self):
        super(RebuildProxyClientTestCase, self).setUp()
        self.factory = utils.FakeProxyFactory()
        self.deployer = deployment.TFTPDeployer(
            templates.TemplateResolver(templates.TemplateCatalog()),
            self.factory)
        self.proxy1 = utils.get_test_proxy()

    def _rebuild(self, proxy6=None):
        subnet6 = None
        if proxy6 is not None:
            subnet6 = utils.get_test_subnet(version=6, tftp=proxy6)
        nic = utils.get_test_nic(
            subnet=utils.get_test_subnet(tftp=self.proxy1), subnet6=subnet6)
        host = utils.get_test_host(interfaces=[nic])
        return rebuild.rebuild_tftp(self.deployer, host, nic)

    def test_single_family(self):
        self.assertTrue(self._rebuild())
        calls = self.factory.publish_calls()
        self.assertEqual(3, len(calls))
        self.assertEqual(list(boot_loaders.ALL), [c[0][0] for c in calls])

    def test_dual_stack_distinct_proxies(self):
        proxy2 = utils.get_test_proxy(id=2, name='proxy2',
                                      url='https://proxy2.example.com:8443')
        self.assertTrue(self._rebuild(proxy6=proxy2))
        self.assertEqual(6, len(self.factory.publish_calls()))
        self.assertEqual(2, len(self.factory.clients))

    def test_dual_stack_same_endpoint(self):
        proxy2 = utils.get_test_proxy(id=2, name='proxy1-v6',
                                      url='https://proxy1.example.com:8443/')
        self.assertTrue(self._rebuild(proxy6=proxy2))
        self.assertEqual(3, len(self.factory.publish_calls()))
        self.assertEqual(1, len(self.factory.clients))

    def test_one_kind_fails_at_the_proxy(self):
        def _publish(kind, mac, content):
            if kind == boot_loaders.BootLoaderKind.PXEGRUB:
                raise exception.BootProxyError(proxy='proxy1',
                                               operation='publish',
                                               reason='down')

        client = self.factory.get_client(self.proxy1)
        client.publish.side_effect = _publish
        self.assertFalse(self._rebuild())
        self.assertEqual(list(boot_loaders.ALL),
                         [c[0][0] for c in client.publish.call_args_list])


class ValidateTestCase(base.TestCase):

    def setUp(self):
        super(ValidateTestCase, self).setUp()
        self.catalog = templates.TemplateCatalog(
            [utils.get_test_template(template_kind='PXELinux')])
        self.resolver = templates.TemplateResolver(self.catalog)

    def _host(self, **kw):
        nic = utils.get_test_nic()
        return utils.get_test_host(interfaces=[nic], **kw), nic

    def test_valid(self):
        host, nic = self._host(pxe_loader='pxelinux.0')
        self.assertEqual([], rebuild.validate_tftp(self.resolver, host, nic))

    def test_missing_template(self):
        host, nic = self._host(pxe_loader='grub2/grubx64.efi')
        errors = rebuild.validate_tftp(self.resolver, host, nic)
        self.assertEqual(1, len(errors))
        self.assertIn('No PXEGrub2 templates were found for Redhat 6.1/x86_64',
                      errors[0])

    def test_missing_template_other_architecture(self):
        host, nic = self._host(architecture='aarch64')
        errors = rebuild.validate_tftp(self.resolver, host, nic)
        self.assertIn('No PXELinux templates were found for '
                      'Redhat 6.1/aarch64', errors[0])

    def test_local_boot_template_does_not_count(self):
        # Only templates bound to the operating system are valid choices.
        host, nic = self._host(pxe_loader='grub/bootx64.efi')
        self.assertIsNotNone(
            self.catalog.find_by_name('PXEGrub default local boot'))
        self.assertEqual(1, len(rebuild.validate_tftp(self.resolver, host,
                                                      nic)))

    def test_no_loader(self):
        host, nic = self._host(pxe_loader=None)
        self.assertEqual([], rebuild.validate_tftp(self.resolver, host, nic))

    def test_not_applicable(self):
        nic = utils.get_test_nic(managed=False)
        host = utils.get_test_host(pxe_loader='grub2/grubx64.efi',
                                   interfaces=[nic])
        self.assertEqual([], rebuild.validate_tftp(self.resolver, host, nic))

    def test_no_operatingsystem(self):
        host, nic = self._host(pxe_loader='grub2/grubx64.efi',
                               operatingsystem=None)
        self.assertEqual([], rebuild.validate_tftp(self.resolver, host, nic))
