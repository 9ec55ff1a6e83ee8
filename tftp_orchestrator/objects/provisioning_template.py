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
class ProvisioningTemplate(base.OrchestratorObject):
    """Jinja2 boot configuration source.

    A template bound to operating systems serves hosts in build state. A
    template may also be selected by name, for hosts that boot locally.
    """
    # Version 1.0: Initial version
    VERSION = '1.0'

    fields = {
        'id': object_fields.IntegerField(nullable=True, default=None),
        'name': object_fields.StringField(),
        'template_kind': object_fields.BootLoaderKindField(),
        'template': object_fields.StringField(),
        # Operating system titles, e.g. "Redhat 6.1".
        'operatingsystems': object_fields.ListOfStringsField(default=[]),
        # Empty means every architecture.
        'architectures': object_fields.ListOfStringsField(default=[]),
    }

    def applies_to(self, operatingsystem, architecture):
        if operatingsystem is None:
            return False
        if operatingsystem.title not in self.operatingsystems:
            return False
        return not self.architectures or architecture in self.architectures
