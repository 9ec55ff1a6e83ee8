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

from tftp_orchestrator.common import boot_loaders
from tftp_orchestrator import objects
from tftp_orchestrator.objects import fields
from tftp_orchestrator.tests import base
from tftp_orchestrator.tests.unit import utils


class RegistryTestCase(base.TestCase):

    def test_objects_registered(self):
        for name in ('Host', 'NetworkInterface', 'Subnet', 'BootProxy',
                     'OperatingSystem', 'ProvisioningTemplate'):
            self.assertTrue(hasattr(objects, name), name)


class DefaultsTestCase(base.TestCase):

    def test_defaults_do_not_override_arguments(self):
        nic = objects.NetworkInterface(identifier='eth0', provision=True,
                                       managed=False)
        self.assertTrue(nic.provision)
        self.assertFalse(nic.managed)
        self.assertFalse(nic.primary)
        self.assertEqual([], nic.attached_devices)
        self.assertEqual('interface', nic.type)

    def test_list_defaults_not_shared(self):
        host1 = objects.Host(name='host1')
        host2 = objects.Host(name='host2')
        host1.params['foo'] = 'bar'
        self.assertEqual({}, host2.params)

    def test_as_dict(self):
        nic = utils.get_test_nic()
        result = nic.as_dict()
        self.assertEqual('52:54:00:12:34:56', result['mac'])
        self.assertEqual('192.168.1.10', result['ip'])
        self.assertEqual('192.168.1.0/24', result['subnet']['network'])
        self.assertEqual('https://proxy1.example.com:8443',
                         result['subnet']['tftp']['url'])


class NetworkInterfaceTestCase(base.TestCase):

    def test_mac_normalized(self):
        nic = utils.get_test_nic(mac='52:54:00:AB:CD:EF')
        self.assertEqual('52:54:00:ab:cd:ef', nic.mac)

    def test_invalid_mac(self):
        self.assertRaises(ValueError, utils.get_test_nic, mac='bogus')

    def test_invalid_type(self):
        self.assertRaises(ValueError, utils.get_test_nic, type='bridge')

    def test_is_bond(self):
        self.assertFalse(utils.get_test_nic().is_bond)
        self.assertTrue(utils.get_test_nic(type='bond', mac=None).is_bond)

    def test_subnet_for(self):
        subnet6 = utils.get_test_subnet(version=6)
        nic = utils.get_test_nic(subnet6=subnet6)
        self.assertIs(nic.subnet, nic.subnet_for(4))
        self.assertIs(subnet6, nic.subnet_for(6))
        self.assertRaises(ValueError, nic.subnet_for, 5)

    def test_str(self):
        self.assertEqual('host1.example.com', str(utils.get_test_nic()))
        self.assertEqual('eth1',
                         str(utils.get_test_nic(name=None,
                                                identifier='eth1')))


class SubnetTestCase(base.TestCase):

    def test_ip_version(self):
        self.assertEqual(4, utils.get_test_subnet().ip_version)
        self.assertEqual(6, utils.get_test_subnet(version=6).ip_version)

    def test_supports_tftp(self):
        self.assertTrue(utils.get_test_subnet().supports_tftp)
        self.assertFalse(utils.get_test_subnet(tftp=None).supports_tftp)


class BootProxyTestCase(base.TestCase):

    def test_endpoint(self):
        proxy = utils.get_test_proxy(url='https://proxy1:8443/')
        self.assertEqual('https://proxy1:8443', proxy.endpoint)

    def test_str(self):
        self.assertEqual('proxy1', str(utils.get_test_proxy()))


class OperatingSystemTestCase(base.TestCase):

    def test_title(self):
        self.assertEqual('Redhat 6.1', utils.get_test_os().title)
        self.assertEqual('Redhat 7', utils.get_test_os(major='7',
                                                       minor=None).title)

    def test_redhat_files(self):
        os_ = utils.get_test_os()
        self.assertEqual('boot/Redhat-6.1-x86_64', os_.pxe_prefix('x86_64'))
        self.assertEqual('boot/Redhat-6.1-x86_64-vmlinuz',
                         os_.kernel('x86_64'))
        self.assertEqual('boot/Redhat-6.1-x86_64-initrd.img',
                         os_.initrd('x86_64'))
        self.assertEqual('kickstart', os_.boot_layout.unattended)

    def test_name_with_spaces(self):
        os_ = utils.get_test_os(name='Red Hat', major='8', minor='2')
        self.assertEqual('boot/Red-Hat-8.2-x86_64', os_.pxe_prefix('x86_64'))

    def test_boot_files_redhat(self):
        os_ = utils.get_test_os()
        self.assertEqual(
            [('boot/Redhat-6.1-x86_64',
              'http://mirror/os/x86_64/images/pxeboot/vmlinuz'),
             ('boot/Redhat-6.1-x86_64',
              'http://mirror/os/x86_64/images/pxeboot/initrd.img')],
            os_.boot_files('x86_64', 'http://mirror/os/x86_64/'))

    def test_boot_files_debian(self):
        os_ = utils.get_test_os(name='Debian', major='12', minor=None,
                                family='Debian', release_name='bookworm')
        base_url = ('http://deb.example.com/debian/dists/bookworm/main/'
                    'installer-amd64/current/images/netboot/'
                    'debian-installer/amd64')
        self.assertEqual(
            [('boot/Debian-12-x86_64', base_url + '/linux'),
             ('boot/Debian-12-x86_64', base_url + '/initrd.gz')],
            os_.boot_files('x86_64', 'http://deb.example.com/debian'))
        self.assertEqual('preseed', os_.boot_layout.unattended)

    def test_boot_files_suse(self):
        os_ = utils.get_test_os(name='OpenSuse', major='15', minor='5',
                                family='Suse')
        self.assertEqual(
            [('boot/OpenSuse-15.5-x86_64',
              'http://mirror/suse/boot/x86_64/loader/linux'),
             ('boot/OpenSuse-15.5-x86_64',
              'http://mirror/suse/boot/x86_64/loader/initrd')],
            os_.boot_files('x86_64', 'http://mirror/suse'))

    def test_invalid_family(self):
        self.assertRaises(ValueError, utils.get_test_os, family='Windows')


class HostTestCase(base.TestCase):

    def test_pxe_loader_kind(self):
        host = utils.get_test_host(pxe_loader='grub2/shim.efi')
        self.assertEqual(boot_loaders.BootLoaderKind.PXEGRUB2,
                         host.pxe_loader_kind)
        self.assertIsNone(utils.get_test_host(pxe_loader='').pxe_loader_kind)
        self.assertIsNone(
            utils.get_test_host(pxe_loader=None).pxe_loader_kind)

    def test_provision_interface(self):
        eth0 = utils.get_test_nic(identifier='eth0', provision=False)
        eth1 = utils.get_test_nic(identifier='eth1', provision=True)
        host = utils.get_test_host(interfaces=[eth0, eth1])
        self.assertIs(eth1, host.provision_interface)

    def test_find_interface(self):
        eth0 = utils.get_test_nic(identifier='eth0')
        host = utils.get_test_host(interfaces=[eth0])
        self.assertIs(eth0, host.find_interface('eth0'))
        self.assertIsNone(host.find_interface('eth1'))

    def test_host_param(self):
        host = utils.get_test_host(params={'kernelcmd': 'quiet'})
        self.assertEqual('quiet', host.host_param('kernelcmd'))
        self.assertIsNone(host.host_param('missing'))


class ProvisioningTemplateTestCase(base.TestCase):

    def test_kind_from_enum(self):
        template = utils.get_test_template(
            template_kind=boot_loaders.BootLoaderKind.PXEGRUB)
        self.assertEqual('PXEGrub', template.template_kind)

    def test_invalid_kind(self):
        self.assertRaises(ValueError, utils.get_test_template,
                          template_kind='iPXE')

    def test_applies_to(self):
        template = utils.get_test_template()
        os_ = utils.get_test_os()
        self.assertTrue(template.applies_to(os_, 'x86_64'))
        self.assertFalse(template.applies_to(os_, 'aarch64'))
        self.assertFalse(template.applies_to(None, 'x86_64'))
        self.assertFalse(
            template.applies_to(utils.get_test_os(minor='2'), 'x86_64'))

    def test_applies_to_any_architecture(self):
        template = utils.get_test_template(architectures=[])
        self.assertTrue(template.applies_to(utils.get_test_os(), 'ppc64le'))

    def test_field_enum_values(self):
        self.assertEqual(('PXELinux', 'PXEGrub', 'PXEGrub2'),
                         fields.BootLoaderKind.ALL)
