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

"""Rebuild and validation of the TFTP configuration of an interface.

Validation only looks at the loader kind the host selected, while a
rebuild refreshes every kind so that switching loaders later needs no
further deployment.
"""

from oslo_log import log as logging

from tftp_orchestrator.common import boot_loaders
from tftp_orchestrator.common.i18n import _
from tftp_orchestrator.orchestration import applicability

LOG = logging.getLogger(__name__)


def rebuild_tftp(deployer, host, nic):
    """Publish the configuration of every loader kind again.

    Kinds are rebuilt in the order of :data:`boot_loaders.ALL`. A kind that
    fails is logged and the next kind is still rebuilt. Kinds rebuilt
    before a failure stay deployed.

    :param deployer: a TFTPDeployer.
    :param host: the Host owning the interface.
    :param nic: a NetworkInterface.
    :returns: True if every kind was rebuilt, or if TFTP does not apply to
        the interface.
    """
    if not applicability.tftp_applies_any(host, nic):
        LOG.info('TFTP not supported for %s, skipping orchestration '
                 'rebuild', nic)
        return True

    status = True
    for kind in boot_loaders.ALL:
        try:
            result = deployer.publish(host, nic, kind)
        except Exception as e:
            LOG.exception('Failed to rebuild TFTP %(kind)s configuration '
                          'for %(nic)s: %(error)s',
                          {'kind': kind, 'nic': nic, 'error': e})
            status = False
            continue
        if not result.ok:
            LOG.error('Failed to rebuild TFTP %(kind)s configuration for '
                      '%(nic)s on %(count)d of %(total)d targets',
                      {'kind': kind, 'nic': nic,
                       'count': len(result.failures),
                       'total': len(result.targets)})
            status = False
    return status


def validate_tftp(resolver, host, nic):
    """Check that the loader kind of the host has a template.

    Nothing is deployed, only templates are looked up as if the host were
    in build state.

    :param resolver: a TemplateResolver.
    :param host: the Host owning the interface.
    :param nic: a NetworkInterface.
    :returns: a list of error messages, empty when the host is valid.
    """
    kind = host.pxe_loader_kind
    if kind is None:
        return []
    if not applicability.tftp_applies_any(host, nic):
        return []
    if host.operatingsystem is None:
        return []
    if resolver.find_build_template(host, kind) is not None:
        return []
    return [_('No %(kind)s templates were found for %(os)s/%(arch)s, make '
              'sure one is associated with the operating system or '
              'change the PXE loader') %
            {'kind': kind, 'os': host.operatingsystem,
             'arch': host.architecture}]
