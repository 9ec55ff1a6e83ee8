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

"""Orchestrator test utilities."""

from unittest import mock

from tftp_orchestrator.boot_proxy import base as base_class
from tftp_orchestrator.objects import host as host_obj
from tftp_orchestrator.objects import network_interface
from tftp_orchestrator.objects import operating_system
from tftp_orchestrator.objects import provisioning_template
from tftp_orchestrator.objects import proxy as proxy_obj
from tftp_orchestrator.objects import subnet as subnet_obj


def get_test_proxy(**kw):
    return proxy_obj.BootProxy(
        id=kw.get('id', 1),
        name=kw.get('name', 'proxy1'),
        url=kw.get('url', 'https://proxy1.example.com:8443'))


def get_test_subnet(**kw):
    version = kw.get('version', 4)
    network = kw.get('network',
                     '192.168.1.0/24' if version == 4 else '2001:db8::/64')
    tftp = kw['tftp'] if 'tftp' in kw else get_test_proxy()
    return subnet_obj.Subnet(
        id=kw.get('id', 1),
        name=kw.get('name', 'subnet%s' % version),
        network=network,
        tftp=tftp)


def get_test_os(**kw):
    return operating_system.OperatingSystem(
        id=kw.get('id', 1),
        name=kw.get('name', 'Redhat'),
        major=kw.get('major', '6'),
        minor=kw.get('minor', '1'),
        family=kw.get('family', 'Redhat'),
        release_name=kw.get('release_name'))


def get_test_nic(**kw):
    subnet = kw['subnet'] if 'subnet' in kw else get_test_subnet()
    return network_interface.NetworkInterface(
        id=kw.get('id', 1),
        identifier=kw.get('identifier', 'eth0'),
        name=kw.get('name', 'host1.example.com'),
        type=kw.get('type', 'interface'),
        mac=kw.get('mac', '52:54:00:12:34:56'),
        ip=kw.get('ip', '192.168.1.10'),
        ip6=kw.get('ip6'),
        subnet=subnet,
        subnet6=kw.get('subnet6'),
        managed=kw.get('managed', True),
        primary=kw.get('primary', True),
        provision=kw.get('provision', True),
        attached_devices=kw.get('attached_devices', []))


def get_test_host(**kw):
    interfaces = kw['interfaces'] if 'interfaces' in kw else [get_test_nic()]
    operatingsystem = (kw['operatingsystem'] if 'operatingsystem' in kw
                       else get_test_os())
    return host_obj.Host(
        id=kw.get('id', 1),
        name=kw.get('name', 'host1.example.com'),
        pxe_loader=kw.get('pxe_loader', 'pxelinux.0'),
        operatingsystem=operatingsystem,
        architecture=kw.get('architecture', 'x86_64'),
        medium_uri=kw.get('medium_uri',
                          'http://mirror.example.com/redhat/6.1/os/x86_64'),
        build=kw.get('build', False),
        interfaces=interfaces,
        params=kw.get('params', {}))


def get_test_template(**kw):
    return provisioning_template.ProvisioningTemplate(
        id=kw.get('id', 1),
        name=kw.get('name', 'Kickstart default PXELinux'),
        template_kind=kw.get('template_kind', 'PXELinux'),
        template=kw.get('template', 'kernel {{ kernel }}'),
        operatingsystems=kw.get('operatingsystems', ['Redhat 6.1']),
        architectures=kw.get('architectures', ['x86_64']))


class FakeProxyFactory(object):
    """Hands out one autospecced client per boot proxy endpoint."""

    def __init__(self):
        self.clients = {}

    def get_client(self, proxy):
        if proxy.endpoint not in self.clients:
            self.clients[proxy.endpoint] = mock.create_autospec(
                base_class.BaseBootProxy, instance=True)
        return self.clients[proxy.endpoint]

    def publish_calls(self):
        return [c for client in self.clients.values()
                for c in client.publish.call_args_list]
