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

from tftp_orchestrator.conf import boot_proxy
from tftp_orchestrator.conf import default
from tftp_orchestrator.conf import tftp

CONF = cfg.CONF

boot_proxy.register_opts(CONF)
default.register_opts(CONF)
tftp.register_opts(CONF)
