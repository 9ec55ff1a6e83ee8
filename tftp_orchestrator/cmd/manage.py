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

"""
Command line access to TFTP orchestration of inventory hosts.
"""

import sys

from oslo_config import cfg
from oslo_log import log

from tftp_orchestrator.common import boot_loaders
from tftp_orchestrator.common import exception
from tftp_orchestrator.common.i18n import _
from tftp_orchestrator.common import inventory
from tftp_orchestrator.common import service
from tftp_orchestrator.conf import CONF
from tftp_orchestrator.orchestration import deployment
from tftp_orchestrator.orchestration import queue as work_queue
from tftp_orchestrator.orchestration import rebuild
from tftp_orchestrator.orchestration import scheduler
from tftp_orchestrator.orchestration import templates

LOG = log.getLogger(__name__)

cli_opts = [
    cfg.StrOpt('inventory',
               required=True,
               help=_('Path of the JSON inventory describing hosts, '
                      'subnets, boot proxies, operating systems and '
                      'templates.')),
]


class TFTPCommand(object):

    def _load(self):
        inv = inventory.Inventory(CONF.inventory)
        host = inv.get_host(CONF.command.host)
        nic = inv.get_interface(host, CONF.command.interface)
        resolver = templates.TemplateResolver(inv.catalog)
        return host, nic, resolver

    def render(self):
        host, _nic, resolver = self._load()
        kinds = boot_loaders.ALL
        if CONF.command.kind:
            kinds = [boot_loaders.get_kind(CONF.command.kind)]
        for kind in kinds:
            resolution = resolver.resolve(host, kind)
            print('# %s' % kind)
            if resolution.found:
                print(resolution.content)
            else:
                print(_('# no template found'))

    def validate(self):
        host, nic, resolver = self._load()
        errors = rebuild.validate_tftp(resolver, host, nic)
        for error in errors:
            print(error)
        if errors:
            sys.exit(1)
        print(_('Host %s is valid.') % host.name)

    def rebuild(self):
        host, nic, resolver = self._load()
        deployer = deployment.TFTPDeployer(resolver)
        if not rebuild.rebuild_tftp(deployer, host, nic):
            print(_('TFTP rebuild of %s failed.') % host.name)
            sys.exit(1)
        print(_('TFTP rebuild of %s succeeded.') % host.name)

    def deploy(self):
        host, nic, resolver = self._load()
        deployer = deployment.TFTPDeployer(resolver)
        queue = work_queue.Queue()
        if CONF.command.destroy:
            scheduler.queue_tftp_destroy(queue, deployer, host, nic)
        else:
            scheduler.queue_tftp(queue, deployer, host, nic)
        ok = queue.process()
        for task in queue:
            print('%s: %s' % (task.name, task.status))
        if not ok:
            sys.exit(1)


def _add_host_arguments(parser):
    parser.add_argument('host', help=_('Name of the inventory host.'))
    parser.add_argument(
        '--interface',
        help=_('Identifier, name or MAC address of the interface. Defaults '
               'to the provisioning interface of the host.'))


def add_command_parsers(subparsers):
    command_object = TFTPCommand()

    parser = subparsers.add_parser(
        'render',
        help=_("Print the boot configuration of a host for every boot "
               "loader kind, or for the one given with --kind."))
    _add_host_arguments(parser)
    parser.add_argument('--kind',
                        choices=[str(k) for k in boot_loaders.ALL])
    parser.set_defaults(func=command_object.render)

    parser = subparsers.add_parser(
        'validate',
        help=_("Check that a template exists for the boot loader of a "
               "host. Returns 1 if it does not."))
    _add_host_arguments(parser)
    parser.set_defaults(func=command_object.validate)

    parser = subparsers.add_parser(
        'rebuild',
        help=_("Publish the configuration of every boot loader kind of a "
               "host again. Returns 1 if any kind failed."))
    _add_host_arguments(parser)
    parser.set_defaults(func=command_object.rebuild)

    parser = subparsers.add_parser(
        'deploy',
        help=_("Queue and run the TFTP work items of a host interface, as "
               "done when the interface is saved, or deleted with "
               "--destroy. Returns 1 if any item failed."))
    _add_host_arguments(parser)
    parser.add_argument('--destroy', action='store_true')
    parser.set_defaults(func=command_object.deploy)


def main():
    command_opt = cfg.SubCommandOpt('command',
                                    title='Command',
                                    help=_('Available commands'),
                                    handler=add_command_parsers)

    CONF.register_cli_opt(command_opt)
    CONF.register_cli_opts(cli_opts)

    service.prepare_command(sys.argv)
    try:
        CONF.command.func()
    except exception.OrchestratorException as e:
        LOG.error('%s', e)
        sys.exit(2)
