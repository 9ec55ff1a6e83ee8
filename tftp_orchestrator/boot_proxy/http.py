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

"""Boot Proxy Client for the smart proxy TFTP REST API."""

from oslo_log import log as logging
import requests
import tenacity

from tftp_orchestrator.boot_proxy import base
from tftp_orchestrator.common import exception
from tftp_orchestrator.common.i18n import _
from tftp_orchestrator.conf import CONF

LOG = logging.getLogger(__name__)


class HTTPBootProxy(base.BaseBootProxy):
    """Talks to ``<url>/tftp`` over HTTP(S).

    Connection failures are retried ``[boot_proxy]retry_attempts`` times,
    any other failure is reported right away as a BootProxyError.
    """

    def _request_kwargs(self):
        kwargs = {'timeout': CONF.boot_proxy.timeout}
        if not CONF.boot_proxy.verify_ssl:
            kwargs['verify'] = False
        elif CONF.boot_proxy.ca_file:
            kwargs['verify'] = CONF.boot_proxy.ca_file
        if CONF.boot_proxy.client_cert:
            if CONF.boot_proxy.client_key:
                kwargs['cert'] = (CONF.boot_proxy.client_cert,
                                  CONF.boot_proxy.client_key)
            else:
                kwargs['cert'] = CONF.boot_proxy.client_cert
        return kwargs

    def _request(self, method, path, operation, data=None):
        @tenacity.retry(
            retry=tenacity.retry_if_exception_type(
                requests.exceptions.ConnectionError),
            stop=tenacity.stop_after_attempt(
                CONF.boot_proxy.retry_attempts),
            wait=tenacity.wait_fixed(CONF.boot_proxy.retry_interval),
            reraise=True
        )
        def _do_request(url):
            return requests.request(method, url, data=data,
                                    **self._request_kwargs())

        url = '/'.join([self.url, 'tftp', path])
        try:
            response = _do_request(url)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            LOG.error('Boot proxy %(proxy)s request %(method)s %(url)s '
                      'failed: %(error)s',
                      {'proxy': self.name, 'method': method, 'url': url,
                       'error': e})
            raise exception.BootProxyError(proxy=self.name,
                                           operation=operation, reason=e)
        return response

    def publish(self, kind, mac, content):
        LOG.debug('Publishing %(kind)s configuration for %(mac)s to '
                  '%(proxy)s', {'kind': kind, 'mac': mac,
                                'proxy': self.name})
        self._request('POST', '%s/%s' % (kind, mac),
                      _('publish %(kind)s configuration for %(mac)s') %
                      {'kind': kind, 'mac': mac},
                      data={'pxeconfig': content})

    def remove(self, kind, mac):
        LOG.debug('Removing %(kind)s configuration for %(mac)s from '
                  '%(proxy)s', {'kind': kind, 'mac': mac,
                                'proxy': self.name})
        self._request('DELETE', '%s/%s' % (kind, mac),
                      _('remove %(kind)s configuration for %(mac)s') %
                      {'kind': kind, 'mac': mac})

    def fetch_boot_file(self, prefix, url):
        LOG.debug('Asking %(proxy)s to fetch %(url)s as %(prefix)s',
                  {'proxy': self.name, 'url': url, 'prefix': prefix})
        self._request('POST', 'fetch_boot_file',
                      _('fetch boot file %s') % url,
                      data={'prefix': prefix, 'path': url})
