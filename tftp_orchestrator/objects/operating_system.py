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

import collections

from tftp_orchestrator.objects import base
from tftp_orchestrator.objects import fields as object_fields

BootLayout = collections.namedtuple(
    'BootLayout', ['kernel', 'initrd', 'unattended', 'media_path'])
"""Where an OS family keeps its installer kernel and initrd.

``media_path`` is relative to the installation media and may reference
``{arch}`` and ``{release}``.
"""

BOOT_LAYOUTS = {
    object_fields.OSFamily.REDHAT: BootLayout(
        kernel='vmlinuz', initrd='initrd.img', unattended='kickstart',
        media_path='images/pxeboot'),
    object_fields.OSFamily.SUSE: BootLayout(
        kernel='linux', initrd='initrd', unattended='provision',
        media_path='boot/{arch}/loader'),
    object_fields.OSFamily.DEBIAN: BootLayout(
        kernel='linux', initrd='initrd.gz', unattended='preseed',
        media_path='dists/{release}/main/installer-{arch}/current/images/'
                   'netboot/debian-installer/{arch}'),
}

# Debian names its architectures differently.
_DEBIAN_ARCHES = {'x86_64': 'amd64', 'aarch64': 'arm64', 'i386': 'i386'}


@base.OrchestratorObjectRegistry.register
class OperatingSystem(base.OrchestratorObject):
    # Version 1.0: Initial version
    VERSION = '1.0'

    fields = {
        'id': object_fields.IntegerField(nullable=True, default=None),
        'name': object_fields.StringField(),
        'major': object_fields.StringField(),
        'minor': object_fields.StringField(nullable=True, default=None),
        'family': object_fields.OSFamilyField(),
        'release_name': object_fields.StringField(nullable=True,
                                                  default=None),
    }

    @property
    def title(self):
        """Name and version, e.g. ``Redhat 6.1``."""
        version = self.major
        if self.minor:
            version = '%s.%s' % (version, self.minor)
        return '%s %s' % (self.name, version)

    @property
    def boot_layout(self):
        return BOOT_LAYOUTS[self.family]

    def pxe_prefix(self, architecture):
        """Boot file prefix on the TFTP server for this OS and arch."""
        return ('boot/%s-%s' % (self.title, architecture)).replace(' ', '-')

    def kernel(self, architecture):
        return '%s-%s' % (self.pxe_prefix(architecture),
                          self.boot_layout.kernel)

    def initrd(self, architecture):
        return '%s-%s' % (self.pxe_prefix(architecture),
                          self.boot_layout.initrd)

    def boot_files(self, architecture, medium_uri):
        """List the installer files a boot proxy has to download.

        :param architecture: the host architecture name.
        :param medium_uri: base URL of the installation media.
        :returns: a list of (prefix, url) tuples, one per file. The prefix
            is :meth:`pxe_prefix`, the proxy appends the file name.
        """
        layout = self.boot_layout
        arch = architecture
        if self.family == object_fields.OSFamily.DEBIAN:
            arch = _DEBIAN_ARCHES.get(architecture, architecture)
        path = layout.media_path.format(arch=arch,
                                        release=self.release_name or '')
        base_url = '/'.join([medium_uri.rstrip('/'), path])
        prefix = self.pxe_prefix(architecture)
        return [(prefix, '/'.join([base_url, name]))
                for name in (layout.kernel, layout.initrd)]

    def __str__(self):
        return self.title
