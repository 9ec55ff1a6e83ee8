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

from oslo_log import log as logging

from tftp_orchestrator.boot_proxy import base

LOG = logging.getLogger(__name__)


class FakeBootProxy(base.BaseBootProxy):
    """Boot proxy that keeps published configuration in memory."""

    def __init__(self, url, name=None):
        super(FakeBootProxy, self).__init__(url, name=name)
        self.configs = {}
        self.boot_files = []

    def publish(self, kind, mac, content):
        LOG.info('Fake boot proxy %(proxy)s: %(kind)s configuration for '
                 '%(mac)s set', {'proxy': self.name, 'kind': kind,
                                 'mac': mac})
        self.configs[(str(kind), mac)] = content

    def remove(self, kind, mac):
        LOG.info('Fake boot proxy %(proxy)s: %(kind)s configuration for '
                 '%(mac)s removed', {'proxy': self.name, 'kind': kind,
                                     'mac': mac})
        self.configs.pop((str(kind), mac), None)

    def fetch_boot_file(self, prefix, url):
        self.boot_files.append((prefix, url))
