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

from oslo_concurrency import lockutils
from oslo_log import log as logging
import stevedore

from tftp_orchestrator.common import exception
from tftp_orchestrator.common import utils
from tftp_orchestrator.conf import CONF

LOG = logging.getLogger(__name__)

EM_SEMAPHORE = 'boot_proxy_driver'


class BootProxyFactory(object):
    """Builds Boot Proxy Clients for boot proxy endpoints.

    The driver class named by ``[boot_proxy]driver`` is loaded through a
    stevedore.driver.DriverManager only once, the first time the factory
    is instantiated. Each call to :meth:`get_client` then returns a client
    bound to one endpoint.
    """

    _driver_class = None

    def __init__(self):
        if not BootProxyFactory._driver_class:
            BootProxyFactory._set_driver_class()

    # NOTE: the lock prevents two concurrent callers from both loading the
    # driver before the first one has stored it.
    @classmethod
    @lockutils.synchronized(EM_SEMAPHORE)
    def _set_driver_class(cls):
        """Load the boot proxy driver class.

        :raises: BootProxyLoadError if the driver cannot be loaded.
        """
        if cls._driver_class:
            return

        driver_name = CONF.boot_proxy.driver
        try:
            _extension_manager = stevedore.driver.DriverManager(
                'tftp_orchestrator.boot_proxy',
                driver_name,
                invoke_on_load=False)
        except Exception as e:
            raise exception.BootProxyLoadError(driver=driver_name, reason=e)

        LOG.debug('Loaded boot proxy driver %s', driver_name)
        cls._driver_class = _extension_manager.driver

    @property
    def driver_class(self):
        return self._driver_class

    def get_client(self, proxy):
        """Return a Boot Proxy Client for a boot proxy record.

        :param proxy: a BootProxy object.
        :returns: an instance of the configured driver bound to the proxy URL.
        """
        return self._driver_class(utils.normalize_url(proxy.url),
                                  name=proxy.name)
