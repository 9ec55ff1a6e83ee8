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

import os

from oslo_config import cfg

from tftp_orchestrator.common.i18n import _

opts = [
    cfg.URIOpt('unattended_url',
               default='http://localhost:3000',
               schemes=('http', 'https'),
               mutable=True,
               help=_('Base URL of the provisioning service. Installer boot '
                      'entries point at '
                      '<unattended_url>/unattended/<flavour>, where the '
                      'flavour depends on the operating system family, '
                      'e.g. kickstart for Red Hat.')),
    cfg.StrOpt('kernel_append_params',
               default='',
               mutable=True,
               help=_('Additional append parameters for installer boot '
                      'entries. A host may override this with the '
                      '"kernelcmd" host parameter.')),
    cfg.DictOpt('global_parameters',
                default={},
                mutable=True,
                help=_('System-wide settings consulted after host '
                       'parameters. The local_boot_<kind> keys name the '
                       'template to use for hosts that are not in build '
                       'state, for example '
                       '"local_boot_PXELinux:my local boot".')),
    cfg.StrOpt('template_dir',
               default=os.path.join('$pybasedir', 'templates'),
               help=_('Directory holding the generic local boot templates '
                      'registered as "<kind> default local boot".')),
]


def register_opts(conf):
    conf.register_opts(opts, group='tftp')
