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
Abstract base class for Boot Proxy Clients.

A boot proxy is a remote agent serving TFTP for one or more subnets. It
stores boot loader configuration keyed by loader kind and MAC address.
"""

import abc


class BaseBootProxy(object, metaclass=abc.ABCMeta):
    """Base class for boot proxy APIs.

    :param url: base URL of the boot proxy.
    :param name: optional display name of the boot proxy.
    """

    def __init__(self, url, name=None):
        self.url = url
        self.name = name or url

    @abc.abstractmethod
    def publish(self, kind, mac, content):
        """Store the boot configuration of one MAC address.

        Publishing identical arguments twice must leave the proxy in the
        same state as publishing them once.

        :param kind: a BootLoaderKind.
        :param mac: MAC address, xx:xx:xx:xx:xx:xx.
        :param content: rendered configuration text.
        :raises: BootProxyError
        """

    @abc.abstractmethod
    def remove(self, kind, mac):
        """Remove the boot configuration of one MAC address.

        :param kind: a BootLoaderKind.
        :param mac: MAC address, xx:xx:xx:xx:xx:xx.
        :raises: BootProxyError
        """

    @abc.abstractmethod
    def fetch_boot_file(self, prefix, url):
        """Ask the proxy to download an installer file.

        :param prefix: destination prefix, e.g. boot/Redhat-6.1-x86_64
        :param url: where the proxy downloads the file from.
        :raises: BootProxyError
        """

    def __str__(self):
        return self.name
