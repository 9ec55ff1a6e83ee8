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

"""Publishes boot configuration to the boot proxies of an interface.

Every (boot proxy, MAC address) pair of an interface receives exactly one
call per operation. A bond is published through the MAC addresses of its
attached devices. A failing call never prevents the calls for the other
pairs, failures are collected in the returned :class:`DeploymentResult`.
"""

import collections

from oslo_log import log as logging

from tftp_orchestrator.common import boot_loaders
from tftp_orchestrator.common import boot_proxy_factory
from tftp_orchestrator.common import exception
from tftp_orchestrator.common.i18n import _
from tftp_orchestrator.orchestration import applicability

LOG = logging.getLogger(__name__)

DeploymentTarget = collections.namedtuple('DeploymentTarget',
                                          ['proxy', 'mac', 'content'])


class DeploymentResult(object):
    """Outcome of one operation over the targets of an interface.

    :ivar kind: the BootLoaderKind, None for boot file fetching.
    :ivar targets: the DeploymentTargets that were attempted.
    :ivar failures: (target, exception) tuples of the failed attempts.
    :ivar skipped: True when no template resolved for a kind the host
        does not use, nothing was attempted then.
    """

    def __init__(self, kind=None, targets=(), failures=(), skipped=False):
        self.kind = kind
        self.targets = list(targets)
        self.failures = list(failures)
        self.skipped = skipped

    @property
    def ok(self):
        return not self.failures

    def raise_for_failures(self):
        """Raise the first failure, if any; return the result otherwise.

        :raises: BootProxyError
        """
        if self.failures:
            target, error = self.failures[0]
            if len(self.failures) == 1:
                raise error
            raise exception.BootProxyError(
                proxy=str(target.proxy), operation=_('deploy %s') % self.kind,
                reason=_('%(count)d of %(total)d targets failed, first '
                         'error: %(error)s') %
                {'count': len(self.failures), 'total': len(self.targets),
                 'error': error})
        return self

    def __repr__(self):
        return ('<DeploymentResult kind=%s targets=%d failures=%d '
                'skipped=%s>' % (self.kind, len(self.targets),
                                 len(self.failures), self.skipped))


class TFTPDeployer(object):
    """Maps resolved boot configuration to boot proxies and MACs.

    :param resolver: a TemplateResolver.
    :param proxy_factory: builds Boot Proxy Clients, defaults to a
        :class:`BootProxyFactory`.
    """

    def __init__(self, resolver, proxy_factory=None):
        self.resolver = resolver
        self._proxy_factory = proxy_factory

    @property
    def proxy_factory(self):
        if self._proxy_factory is None:
            self._proxy_factory = boot_proxy_factory.BootProxyFactory()
        return self._proxy_factory

    def mac_addresses_for_provisioning(self, host, nic):
        """MAC addresses that boot through an interface, in order.

        The attached devices of a bond are looked up on the host when this
        is called. Devices that are missing or have no MAC are skipped.
        """
        if not nic.is_bond:
            return [nic.mac] if nic.mac else []
        macs = []
        for identifier in nic.attached_devices:
            child = host.find_interface(identifier)
            if child is None or not child.mac:
                LOG.warning('Bond %(bond)s of host %(host)s attaches '
                            '%(child)s which has no MAC address, it will '
                            'not be configured',
                            {'bond': nic, 'host': host.name,
                             'child': identifier})
                continue
            if child.mac not in macs:
                macs.append(child.mac)
        return macs

    def deployment_targets(self, host, nic, content=None, macs=None):
        """Build the unique (proxy, MAC) targets of an interface.

        :param host: the Host owning the interface.
        :param nic: a NetworkInterface.
        :param content: configuration carried by every target.
        :param macs: restrict the targets to these MAC addresses.
        :returns: a list of DeploymentTargets, one per boot proxy endpoint
            and MAC address.
        """
        proxies = applicability.feasible_proxies(host, nic)
        if not proxies:
            return []
        all_macs = self.mac_addresses_for_provisioning(host, nic)
        if macs is not None:
            all_macs = [mac for mac in all_macs if mac in macs]
        targets = []
        seen = set()
        for proxy in proxies:
            for mac in all_macs:
                if (proxy.endpoint, mac) in seen:
                    continue
                seen.add((proxy.endpoint, mac))
                targets.append(DeploymentTarget(proxy, mac, content))
        LOG.debug('TFTP targets of %(nic)s on host %(host)s: %(targets)s',
                  {'nic': nic, 'host': host.name,
                   'targets': ', '.join('%s/%s' % (t.proxy, t.mac)
                                        for t in targets)})
        return targets

    def _call_targets(self, targets, call):
        failures = []
        for target in targets:
            client = self.proxy_factory.get_client(target.proxy)
            # NOTE: drivers are pluggable, any error they raise only fails
            # this target.
            try:
                call(client, target)
            except Exception as e:
                LOG.error('Boot proxy %(proxy)s failed for %(mac)s: '
                          '%(error)s', {'proxy': target.proxy,
                                        'mac': target.mac, 'error': e})
                failures.append((target, e))
        return failures

    def publish(self, host, nic, kind, macs=None):
        """Publish the configuration of a loader kind for an interface.

        :param host: the Host owning the interface.
        :param nic: a NetworkInterface.
        :param kind: a BootLoaderKind or its name.
        :param macs: restrict publishing to these MAC addresses.
        :returns: a :class:`DeploymentResult`.
        :raises: BootTemplateMissing if no template resolves for the kind
            the host selected. Validation rejects such a host beforehand.
        """
        kind = boot_loaders.get_kind(kind)
        if not applicability.feasible_proxies(host, nic):
            LOG.debug('No boot proxy serves %(nic)s of host %(host)s, '
                      'nothing to publish', {'nic': nic, 'host': host.name})
            return DeploymentResult(kind)

        resolution = self.resolver.resolve(host, kind)
        if not resolution.found:
            if kind == host.pxe_loader_kind:
                raise exception.BootTemplateMissing(kind=str(kind),
                                                    host=host.name)
            LOG.info('Skipping TFTP %(kind)s configuration for %(host)s, '
                     'no template found', {'kind': kind, 'host': host.name})
            return DeploymentResult(kind, skipped=True)

        targets = self.deployment_targets(host, nic, resolution.content,
                                          macs=macs)
        LOG.info('Deploying TFTP %(kind)s configuration for %(host)s to '
                 '%(count)d target(s)',
                 {'kind': kind, 'host': host.name, 'count': len(targets)})
        failures = self._call_targets(
            targets,
            lambda client, t: client.publish(kind, t.mac, t.content))
        return DeploymentResult(kind, targets, failures)

    def unpublish(self, host, nic, kind, macs=None):
        """Remove the configuration of a loader kind for an interface.

        :returns: a :class:`DeploymentResult`.
        """
        kind = boot_loaders.get_kind(kind)
        targets = self.deployment_targets(host, nic, macs=macs)
        LOG.info('Removing TFTP %(kind)s configuration for %(host)s from '
                 '%(count)d target(s)',
                 {'kind': kind, 'host': host.name, 'count': len(targets)})
        failures = self._call_targets(
            targets, lambda client, t: client.remove(kind, t.mac))
        return DeploymentResult(kind, targets, failures)

    def fetch_boot_files(self, host, nic):
        """Ask every boot proxy of an interface to download installer files.

        Each proxy is asked once, whatever the number of MAC addresses.

        :returns: a :class:`DeploymentResult` without kind.
        """
        os_ = host.operatingsystem
        if os_ is None or not host.architecture or not host.medium_uri:
            LOG.info('Host %s lacks an operating system, architecture or '
                     'installation medium, no boot files to fetch',
                     host.name)
            return DeploymentResult(skipped=True)

        boot_files = os_.boot_files(host.architecture, host.medium_uri)
        targets = [DeploymentTarget(proxy, None, None)
                   for proxy in applicability.feasible_proxies(host, nic)]

        def _fetch(client, target):
            for prefix, url in boot_files:
                client.fetch_boot_file(prefix, url)

        LOG.info('Fetching TFTP boot files of %(os)s for %(host)s on '
                 '%(count)d boot proxies',
                 {'os': os_, 'host': host.name, 'count': len(targets)})
        return DeploymentResult(None, targets,
                                self._call_targets(targets, _fetch))
