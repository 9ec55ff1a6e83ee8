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
from tftp_orchestrator.objects import base
from tftp_orchestrator.objects import fields as object_fields


@base.OrchestratorObjectRegistry.register
class Host(base.OrchestratorObject):
    # Version 1.0: Initial version
    VERSION = '1.0'

    fields = {
        'id': object_fields.IntegerField(nullable=True, default=None),
        'name': object_fields.StringField(),
        # Loader file, e.g. "grub2/grubx64.efi"; empty or "None" when the
        # host does not network boot.
        'pxe_loader': object_fields.StringField(nullable=True, default=None),
        'operatingsystem': object_fields.ObjectField(
            'OperatingSystem', nullable=True, default=None),
        'architecture': object_fields.StringField(nullable=True,
                                                  default=None),
        'medium_uri': object_fields.StringField(nullable=True, default=None),
        'build': object_fields.BooleanField(default=False),
        'interfaces': object_fields.ListOfObjectsField('NetworkInterface',
                                                       default=[]),
        'params': object_fields.FlexibleDictField(nullable=True, default={}),
    }

    @property
    def pxe_loader_kind(self):
        """The :class:`BootLoaderKind` selected by the loader, or None."""
        return boot_loaders.kind_for_loader(self.pxe_loader)

    @property
    def provision_interface(self):
        for nic in self.interfaces:
            if nic.provision:
                return nic

    def find_interface(self, identifier):
        """Return the interface with an identifier, or None."""
        for nic in self.interfaces:
            if nic.identifier == identifier:
                return nic

    def host_param(self, name):
        return (self.params or {}).get(name)

    def __str__(self):
        return self.name
