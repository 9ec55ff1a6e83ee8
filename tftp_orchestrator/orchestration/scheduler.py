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

"""Turns interface changes into queued TFTP work items.

Queueing the same interface twice queues its items twice. That is safe,
publishing identical configuration is idempotent.
"""

from oslo_log import log as logging

from tftp_orchestrator.common.i18n import _
from tftp_orchestrator.orchestration import applicability

LOG = logging.getLogger(__name__)

DEPLOY_PRIORITY = 20
DELETE_PRIORITY = 20
FETCH_PRIORITY = 25


def expand_interfaces(host, nic):
    """Return the physical interfaces behind an interface.

    A bond expands to its attached devices that exist on the host, any
    other interface to itself.
    """
    if not nic.is_bond:
        return [nic]
    children = []
    for identifier in nic.attached_devices:
        child = host.find_interface(identifier)
        if child is None:
            LOG.warning('Bond %(bond)s of host %(host)s attaches unknown '
                        'interface %(child)s',
                        {'bond': nic, 'host': host.name,
                         'child': identifier})
            continue
        children.append(child)
    return children


def _deploy(deployer, host, nic, kind, macs):
    deployer.publish(host, nic, kind, macs=macs).raise_for_failures()


def _remove(deployer, host, nic, kind, macs):
    deployer.unpublish(host, nic, kind, macs=macs).raise_for_failures()


def _fetch(deployer, host, nic, fetched=None):
    # Boot files are stored per proxy, the children of a bond share them.
    if fetched:
        LOG.debug('Boot files for %(nic)s of host %(host)s were already '
                  'fetched', {'nic': nic, 'host': host.name})
        return
    deployer.fetch_boot_files(host, nic).raise_for_failures()
    if fetched is not None:
        fetched.append(nic)


def _macs_of(nic, child):
    # A bond is deployed through its own subnets, one child MAC at a time.
    if nic.is_bond:
        return [child.mac] if child.mac else []
    return None


def queue_tftp(queue, deployer, host, nic):
    """Queue the deployment of an interface after it was saved.

    Two items are queued per physical interface: "Deploy TFTP <kind>
    config" for the loader kind of the host, and "Fetch TFTP boot files".
    The fetch items of the children of a bond download the boot files
    once, later ones only run if the earlier ones failed.

    :param queue: a Queue.
    :param deployer: the TFTPDeployer the items call.
    :param host: the Host owning the interface.
    :param nic: the saved NetworkInterface.
    :returns: the list of queued tasks, empty if TFTP does not apply.
    """
    if not applicability.tftp_applies_any(host, nic):
        LOG.debug('TFTP does not apply to %(nic)s of host %(host)s, '
                  'nothing queued', {'nic': nic, 'host': host.name})
        return []

    kind = host.pxe_loader_kind
    fetched = [] if nic.is_bond else None
    tasks = []
    for child in expand_interfaces(host, nic):
        tasks.append(queue.create(
            _('Deploy TFTP %(kind)s config for %(nic)s') %
            {'kind': kind, 'nic': child},
            DEPLOY_PRIORITY, _deploy, deployer, host, nic, kind,
            _macs_of(nic, child)))
        tasks.append(queue.create(
            _('Fetch TFTP boot files for %s') % child,
            FETCH_PRIORITY, _fetch, deployer, host, nic, fetched))
    return tasks


def queue_tftp_destroy(queue, deployer, host, nic):
    """Queue the removal of the configuration of a deleted interface.

    :returns: the list of queued tasks, empty if TFTP does not apply.
    """
    if not applicability.tftp_applies_any(host, nic):
        return []

    kind = host.pxe_loader_kind
    tasks = []
    for child in expand_interfaces(host, nic):
        tasks.append(queue.create(
            _('Delete TFTP %(kind)s config for %(nic)s') %
            {'kind': kind, 'nic': child},
            DELETE_PRIORITY, _remove, deployer, host, nic, kind,
            _macs_of(nic, child)))
    return tasks
