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

"""Decides whether an interface takes part in TFTP orchestration.

Each IP family is judged on its own: a dual-stack interface may need a
boot configuration on IPv4, on IPv6, on both or on neither. Not applying
is a normal outcome, never an error.
"""

from tftp_orchestrator.common import exception

IP_VERSIONS = (4, 6)


def _ensure_member(host, nic):
    if not any(iface is nic for iface in host.interfaces):
        raise exception.InterfaceNotFound(interface=str(nic),
                                          host=host.name)


def tftp_applies(host, nic, ip_version):
    """Whether an interface needs a boot configuration for an IP family.

    :param host: the Host owning the interface.
    :param nic: a NetworkInterface of the host.
    :param ip_version: 4 or 6.
    :returns: True if the interface is managed and marked for
        provisioning, its subnet of that family has a boot proxy and the
        host selected a boot loader.
    :raises: InterfaceNotFound if the interface does not belong to the host.
    """
    _ensure_member(host, nic)
    # NOTE: unmanaged interfaces are rejected before anything else is
    # looked at.
    if not nic.managed:
        return False
    if not nic.provision:
        return False
    subnet = nic.subnet_for(ip_version)
    if subnet is None or not subnet.supports_tftp:
        return False
    return host.pxe_loader_kind is not None


def tftp_proxy(host, nic, ip_version):
    """Return the boot proxy of an applicable IP family, or None."""
    if not tftp_applies(host, nic, ip_version):
        return None
    return nic.subnet_for(ip_version).tftp


def applicable_ip_versions(host, nic):
    return [version for version in IP_VERSIONS
            if tftp_applies(host, nic, version)]


def tftp_applies_any(host, nic):
    return bool(applicable_ip_versions(host, nic))


def feasible_proxies(host, nic):
    """Unique boot proxies serving the interface, IPv4 first.

    Two families bound to the same endpoint yield it once.
    """
    proxies = []
    seen = set()
    for version in IP_VERSIONS:
        proxy = tftp_proxy(host, nic, version)
        if proxy is None or proxy.endpoint in seen:
            continue
        seen.add(proxy.endpoint)
        proxies.append(proxy)
    return proxies
