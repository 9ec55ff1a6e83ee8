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
class Subnet(base.OrchestratorObject):
    # Version 1.0: Initial version
    VERSION = '1.0'

    fields = {
        'id': object_fields.IntegerField(nullable=True, default=None),
        'name': object_fields.StringField(nullable=True, default=None),
        'network': object_fields.IPNetworkField(),
        'tftp': object_fields.ObjectField('BootProxy', nullable=True,
                                          default=None),
    }

    @property
    def ip_version(self):
        return self.network.version

    @property
    def supports_tftp(self):
        return self.tftp is not None

    def __str__(self):
        return self.name or str(self.network)
