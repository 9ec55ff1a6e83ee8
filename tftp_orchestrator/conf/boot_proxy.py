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

from oslo_config import cfg

from tftp_orchestrator.common.i18n import _

opts = [
    cfg.StrOpt('driver',
               default='http',
               help=_('Boot proxy driver to use, loaded from the '
                      '"tftp_orchestrator.boot_proxy" entrypoint. "http" '
                      'talks to a smart proxy TFTP REST API, "fake" only '
                      'records the calls.')),
    cfg.IntOpt('timeout',
               default=60,
               min=1,
               help=_('Timeout in seconds for a single request to a boot '
                      'proxy.')),
    cfg.IntOpt('retry_attempts',
               default=1,
               min=1,
               help=_('Number of attempts made for a boot proxy request '
                      'that fails to connect. The default of 1 disables '
                      'retrying.')),
    cfg.IntOpt('retry_interval',
               default=2,
               min=0,
               help=_('Number of seconds to wait between boot proxy '
                      'connection attempts.')),
    cfg.BoolOpt('verify_ssl',
                default=True,
                help=_('Verify the TLS certificate presented by boot '
                       'proxies.')),
    cfg.StrOpt('ca_file',
               help=_('CA bundle used to verify boot proxy certificates. '
                      'Defaults to the system bundle.')),
    cfg.StrOpt('client_cert',
               help=_('Client certificate presented to boot proxies.')),
    cfg.StrOpt('client_key',
               help=_('Private key of the client certificate.')),
]


def register_opts(conf):
    conf.register_opts(opts, group='boot_proxy')
