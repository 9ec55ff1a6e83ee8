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

"""Loads hosts and their environment from a JSON inventory file.

The inventory is a JSON object with the lists ``proxies``, ``subnets``,
``operatingsystems``, ``templates`` and ``hosts``. Records reference each
other by name: a subnet names its ``tftp`` proxy, a host its
``operatingsystem`` title, an interface its ``subnet`` and ``subnet6``.
A template either carries its ``template`` text or names a ``file``
relative to the inventory.
"""

import os

from oslo_log import log as logging
from oslo_serialization import jsonutils
from oslo_utils import netutils

from tftp_orchestrator.common import exception
from tftp_orchestrator.common.i18n import _
from tftp_orchestrator.common import utils
from tftp_orchestrator.objects import host as host_obj
from tftp_orchestrator.objects import network_interface
from tftp_orchestrator.objects import operating_system
from tftp_orchestrator.objects import provisioning_template
from tftp_orchestrator.objects import proxy as proxy_obj
from tftp_orchestrator.objects import subnet as subnet_obj
from tftp_orchestrator.orchestration import templates

LOG = logging.getLogger(__name__)


class Inventory(object):
    """Objects built from an inventory file.

    :ivar hosts: Host objects keyed by name.
    :ivar catalog: a TemplateCatalog holding the inventory templates and
        the generic local boot templates.
    """

    def __init__(self, path):
        self.path = path
        self.proxies = {}
        self.subnets = {}
        self.operatingsystems = {}
        self.hosts = {}
        self.catalog = templates.TemplateCatalog()
        self._load()

    def _error(self, reason):
        return exception.InventoryError(path=self.path, reason=reason)

    def _lookup(self, registry, name, what):
        if name is None:
            return None
        try:
            return registry[name]
        except KeyError:
            raise self._error(_('unknown %(what)s "%(name)s"') %
                              {'what': what, 'name': name})

    def _load(self):
        try:
            with open(self.path, 'r') as f:
                data = jsonutils.loads(f.read())
        except (IOError, TypeError, ValueError) as e:
            raise self._error(e)
        if not isinstance(data, dict):
            raise self._error(_('the top level must be an object'))

        try:
            self._load_records(data)
        except (KeyError, TypeError, ValueError) as e:
            raise self._error(e)
        LOG.debug('Loaded inventory %(path)s with %(count)d host(s)',
                  {'path': self.path, 'count': len(self.hosts)})

    def _load_records(self, data):
        for record in data.get('proxies', []):
            proxy = proxy_obj.BootProxy(**record)
            self.proxies[proxy.name or proxy.url] = proxy

        for record in data.get('subnets', []):
            record = dict(record)
            record['tftp'] = self._lookup(self.proxies, record.get('tftp'),
                                          _('boot proxy'))
            subnet = subnet_obj.Subnet(**record)
            self.subnets[subnet.name or str(subnet.network)] = subnet

        for record in data.get('operatingsystems', []):
            os_ = operating_system.OperatingSystem(**record)
            self.operatingsystems[os_.title] = os_

        base_dir = os.path.dirname(os.path.abspath(self.path))
        for record in data.get('templates', []):
            record = dict(record)
            file_name = record.pop('file', None)
            if file_name is not None:
                record['template'] = utils.read_file(
                    os.path.join(base_dir, file_name))
            self.catalog.register(
                provisioning_template.ProvisioningTemplate(**record))

        for record in data.get('hosts', []):
            record = dict(record)
            record['operatingsystem'] = self._lookup(
                self.operatingsystems, record.get('operatingsystem'),
                _('operating system'))
            record['interfaces'] = [self._load_interface(nic)
                                    for nic in record.get('interfaces', [])]
            host = host_obj.Host(**record)
            self.hosts[host.name] = host

    def _load_interface(self, record):
        record = dict(record)
        if record.get('mac'):
            record['mac'] = utils.validate_and_normalize_mac(record['mac'])
        for key in ('subnet', 'subnet6'):
            record[key] = self._lookup(self.subnets, record.get(key),
                                       _('subnet'))
        return network_interface.NetworkInterface(**record)

    def get_host(self, name):
        """Return a host by name.

        :raises: HostNotFound
        """
        try:
            return self.hosts[name]
        except KeyError:
            raise exception.HostNotFound(host=name)

    def get_interface(self, host, identifier=None):
        """Return an interface of a host.

        :param identifier: identifier, name or MAC address of the interface.
            Defaults to the provisioning interface.
        :raises: InterfaceNotFound
        """
        if identifier is None:
            nic = host.provision_interface
        else:
            mac = identifier
            if netutils.is_valid_mac(identifier):
                mac = identifier.lower()
            nic = None
            for candidate in host.interfaces:
                if (identifier in (candidate.identifier, candidate.name)
                        or mac == candidate.mac):
                    nic = candidate
                    break
        if nic is None:
            raise exception.InterfaceNotFound(
                interface=identifier or _('provisioning interface'),
                host=host.name)
        return nic
