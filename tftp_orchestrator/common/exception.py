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

"""TFTP orchestration exceptions list.

A boot template that cannot be resolved is not an exception, see
:data:`tftp_orchestrator.orchestration.templates.NOT_FOUND`.
"""
import collections
from http import client as http_client
import json

from oslo_log import log as logging
from oslo_utils import excutils

from tftp_orchestrator.common.i18n import _
from tftp_orchestrator.conf import CONF

LOG = logging.getLogger(__name__)


def _ensure_exception_kwargs_serializable(exc_class_name, kwargs):
    """Ensure that kwargs are serializable

    Exceptions may be recorded on queued work items and reported back to
    the caller, so every kwarg is converted to JSON or, as a last resort,
    to a string. Unserializable kwargs are dropped.

    :param exc_class_name: an OrchestratorException class name.
    :param kwargs: a dictionary of keyword arguments passed to the exception
        constructor.
    :returns: a dictionary of serializable keyword arguments.
    """
    serializers = [(json.dumps, _('when converting to JSON')),
                   (str, _('when converting to string'))]
    exceptions = collections.defaultdict(list)
    serializable_kwargs = {}
    for k, v in kwargs.items():
        for serializer, msg in serializers:
            try:
                serializable_kwargs[k] = serializer(v)
                exceptions.pop(k, None)
                break
            except Exception as e:
                exceptions[k].append(
                    '(%(serializer_type)s) %(e_type)s: %(e_contents)s' %
                    {'serializer_type': msg, 'e_contents': e,
                     'e_type': e.__class__.__name__})
    if exceptions:
        LOG.error("One or more arguments passed to the %(exc_class)s "
                  "constructor as kwargs can not be serialized. The "
                  "serialized arguments: %(serialized)s. These "
                  "unserialized kwargs were dropped because of the "
                  "exceptions encountered during their "
                  "serialization:\n%(errors)s",
                  dict(errors=';\n'.join("%s: %s" % (k, '; '.join(v))
                                         for k, v in exceptions.items()),
                       exc_class=exc_class_name,
                       serialized=serializable_kwargs))
        for k in exceptions:
            del kwargs[k]
    return serializable_kwargs


class OrchestratorException(Exception):
    """Base TFTP orchestration exception

    To correctly use this class, inherit from it and define
    a '_msg_fmt' property. That _msg_fmt will get printf'd
    with the keyword arguments provided to the constructor.

    If you need to access the message from an exception you should use
    str(exc)

    """

    _msg_fmt = _("An unknown exception occurred.")
    code = http_client.INTERNAL_SERVER_ERROR

    def __init__(self, message=None, **kwargs):
        self.kwargs = _ensure_exception_kwargs_serializable(
            self.__class__.__name__, kwargs)

        if 'code' not in self.kwargs:
            self.kwargs['code'] = self.code
        else:
            self.code = int(kwargs['code'])

        if not message:
            try:
                message = self._msg_fmt % kwargs

            except Exception:
                with excutils.save_and_reraise_exception() as ctxt:
                    # kwargs doesn't match a variable in the message
                    # log the issue and the kwargs
                    prs = ', '.join('%s=%s' % pair for pair in kwargs.items())
                    LOG.exception('Exception in string format operation '
                                  '(arguments %s)', prs)
                    if not CONF.fatal_exception_format_errors:
                        # at least get the core message out if something
                        # happened
                        message = self._msg_fmt
                        ctxt.reraise = False

        super(OrchestratorException, self).__init__(message)


class Invalid(OrchestratorException):
    _msg_fmt = _("Unacceptable parameters.")
    code = http_client.BAD_REQUEST


class InvalidParameterValue(Invalid):
    _msg_fmt = "%(err)s"


class InvalidMAC(Invalid):
    _msg_fmt = _("Expected a MAC address but received %(mac)s.")


class InventoryError(Invalid):
    _msg_fmt = _("Inventory %(path)s could not be loaded: %(reason)s")


class NotFound(OrchestratorException):
    _msg_fmt = _("Resource could not be found.")
    code = http_client.NOT_FOUND


class InterfaceNotFound(NotFound):
    _msg_fmt = _("Interface %(interface)s could not be found on host "
                 "%(host)s.")


class HostNotFound(NotFound):
    _msg_fmt = _("Host %(host)s could not be found.")


class BootProxyLoadError(OrchestratorException):
    _msg_fmt = _("Failed to load boot proxy driver %(driver)s, "
                 "reason: %(reason)s")


class BootProxyError(OrchestratorException):
    _msg_fmt = _("Boot proxy %(proxy)s failed to %(operation)s: "
                 "%(reason)s")
    code = http_client.BAD_GATEWAY


class BootTemplateMissing(OrchestratorException):
    _msg_fmt = _("No %(kind)s template could be resolved for host "
                 "%(host)s. The host configuration should have been "
                 "rejected by validation.")
    code = http_client.CONFLICT
