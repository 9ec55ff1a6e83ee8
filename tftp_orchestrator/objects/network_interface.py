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

from tftp_orchestrator.objects import base
from tftp_orchestrator.objects import fields as object_fields


@base.OrchestratorObjectRegistry.register
class NetworkInterface(base.OrchestratorObject):
    """A host network interface.

    A bond carries no MAC of its own. Its ``attached_devices`` list the
    identifiers of the physical interfaces of the same host, in order.
    """
    # Version 1.0: Initial version
    VERSION = '1.0'

    fields = {
        'id': object_fields.IntegerField(nullable=True, default=None),
        'identifier': object_fields.StringField(nullable=True, default=None),
        'name': object_fields.StringField(nullable=True, default=None),
        'type': object_fields.InterfaceTypeField(
            default=object_fields.InterfaceType.INTERFACE),
        'mac': object_fields.MACAddressField(nullable=True, default=None),
        'ip': object_fields.IPV4AddressField(nullable=True, default=None),
        'ip6': object_fields.IPV6AddressField(nullable=True, default=None),
        'subnet': object_fields.ObjectField('Subnet', nullable=True,
                                            default=None),
        'subnet6': object_fields.ObjectField('Subnet', nullable=True,
                                             default=None),
        'managed': object_fields.BooleanField(default=True),
        'primary': object_fields.BooleanField(default=False),
        'provision': object_fields.BooleanField(default=False),
        'attached_devices': object_fields.ListOfStringsField(default=[]),
    }

    @property
    def is_bond(self):
        return self.type == object_fields.InterfaceType.BOND

    def subnet_for(self, ip_version):
        """Return the subnet of an IP family, 4 or 6."""
        if ip_version == 4:
            return self.subnet
        if ip_version == 6:
            return self.subnet6
        raise ValueError('Unknown IP version %s' % ip_version)

    def __str__(self):
        return self.name or self.identifier or self.mac or ''
