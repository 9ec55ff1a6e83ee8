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

"""Resolution and rendering of boot loader configuration.

For a host and a loader kind the first matching source wins:

#. the template named by the ``local_boot_<kind>`` host parameter, for a
   host that is not in build state;
#. the template named by the ``local_boot_<kind>`` global setting, same
   condition;
#. the template bound to the host operating system and architecture,
   for a host in build state;
#. the generic ``<kind> default local boot`` template, for a host that is
   not in build state.

A host in build state without an operating system template resolves to
:data:`NOT_FOUND`.
"""

import collections
import os

import jinja2
from oslo_log import log as logging

from tftp_orchestrator.common import boot_loaders
from tftp_orchestrator.common import exception
from tftp_orchestrator.common.i18n import _
from tftp_orchestrator.common import utils
from tftp_orchestrator.conf import CONF
from tftp_orchestrator.objects import provisioning_template

LOG = logging.getLogger(__name__)

HOST_PARAMETER = 'host_parameter'
GLOBAL_SETTING = 'global_setting'
OS_TEMPLATE = 'os_template'
LOCAL_BOOT = 'local_boot'

LOCAL_BOOT_FILES = {
    boot_loaders.BootLoaderKind.PXELINUX: 'pxelinux_local_boot.template',
    boot_loaders.BootLoaderKind.PXEGRUB: 'pxegrub_local_boot.template',
    boot_loaders.BootLoaderKind.PXEGRUB2: 'pxegrub2_local_boot.template',
}


class Resolution(collections.namedtuple('Resolution',
                                        ['content', 'source', 'template'])):
    """Outcome of a template resolution.

    :ivar content: the rendered configuration, None when nothing matched.
    :ivar source: which resolution step matched.
    :ivar template: the ProvisioningTemplate that was rendered.
    """

    @property
    def found(self):
        return self.content is not None


NOT_FOUND = Resolution(None, None, None)


def local_boot_key(kind):
    return 'local_boot_%s' % kind


def default_local_boot_name(kind):
    return '%s default local boot' % kind


class ConfSettings(object):
    """Global settings read from ``[tftp]global_parameters``."""

    def get(self, key, default=None):
        return CONF.tftp.global_parameters.get(key, default)


class TemplateCatalog(object):
    """In-memory registry of provisioning templates.

    :param templates: ProvisioningTemplate objects to register.
    :param load_local_boot: register the generic local boot templates
        found in ``[tftp]template_dir``.
    """

    def __init__(self, templates=(), load_local_boot=True):
        self._templates = []
        if load_local_boot:
            self.load_local_boot_templates()
        for template in templates:
            self.register(template)

    def register(self, template):
        """Add a template, replacing a registered one of the same name."""
        self._templates = [t for t in self._templates
                           if t.name != template.name]
        self._templates.append(template)
        return template

    def load_local_boot_templates(self, template_dir=None):
        template_dir = template_dir or CONF.tftp.template_dir
        for kind, file_name in LOCAL_BOOT_FILES.items():
            path = os.path.join(template_dir, file_name)
            self.register(provisioning_template.ProvisioningTemplate(
                name=default_local_boot_name(kind),
                template_kind=kind,
                template=utils.read_file(path)))

    def find_by_name(self, name):
        for template in self._templates:
            if template.name == name:
                return template

    def find_for(self, operatingsystem, architecture, kind):
        """Return the template bound to an OS and architecture, or None."""
        kind = boot_loaders.get_kind(kind)
        for template in self._templates:
            if (template.template_kind == kind.value
                    and template.applies_to(operatingsystem, architecture)):
                return template

    def __iter__(self):
        return iter(self._templates)

    def __len__(self):
        return len(self._templates)


def build_template_params(host, kind):
    """Build the variables boot templates are rendered with.

    :param host: a Host.
    :param kind: a BootLoaderKind.
    :returns: a dict. ``kernel``, ``initrd``, ``pxe_prefix`` and
        ``provision_url`` are only set when the host has an operating
        system and an architecture.
    """
    unattended_url = CONF.tftp.unattended_url.rstrip('/')
    params = {
        'host': host,
        'kind': str(kind),
        'operatingsystem': host.operatingsystem,
        'architecture': host.architecture,
        'medium_uri': host.medium_uri,
        'unattended_url': unattended_url,
        'append': (host.host_param('kernelcmd')
                   or CONF.tftp.kernel_append_params),
    }
    os_ = host.operatingsystem
    arch = host.architecture
    if os_ is not None and arch:
        params.update({
            'pxe_prefix': os_.pxe_prefix(arch),
            'kernel': os_.kernel(arch),
            'initrd': os_.initrd(arch),
            'provision_url': '%s/unattended/%s' % (
                unattended_url, os_.boot_layout.unattended),
        })
    return params


class TemplateResolver(object):
    """Produces boot configuration for a host and a loader kind.

    :param catalog: a TemplateCatalog.
    :param settings: global settings provider, any object with a
        ``get(key)`` method. Defaults to :class:`ConfSettings`.
    """

    def __init__(self, catalog, settings=None):
        self.catalog = catalog
        self.settings = settings if settings is not None else ConfSettings()

    def find_build_template(self, host, kind):
        """Return the template a host in build state would boot, or None."""
        return self.catalog.find_for(host.operatingsystem,
                                     host.architecture, kind)

    def _local_boot_candidates(self, host, kind):
        key = local_boot_key(kind)
        yield HOST_PARAMETER, host.host_param(key)
        yield GLOBAL_SETTING, self.settings.get(key)
        yield LOCAL_BOOT, default_local_boot_name(kind)

    def resolve(self, host, kind):
        """Resolve and render the configuration of a loader kind.

        Rendering has no side effects, resolving an unchanged host twice
        yields identical content.

        :param host: a Host.
        :param kind: a BootLoaderKind or its name.
        :returns: a :class:`Resolution`, :data:`NOT_FOUND` if no template
            matched.
        :raises: InvalidParameterValue if the matched template does not
            render.
        """
        kind = boot_loaders.get_kind(kind)
        if host.build:
            template = self.find_build_template(host, kind)
            if template is None:
                LOG.debug('No %(kind)s template for %(os)s/%(arch)s of '
                          'host %(host)s',
                          {'kind': kind, 'os': host.operatingsystem,
                           'arch': host.architecture, 'host': host.name})
                return NOT_FOUND
            return self._render(host, kind, template, OS_TEMPLATE)

        for source, name in self._local_boot_candidates(host, kind):
            if not name:
                continue
            template = self.catalog.find_by_name(name)
            if template is None:
                LOG.warning('Template "%(name)s" selected by %(source)s '
                            '%(key)s does not exist, ignoring it for host '
                            '%(host)s',
                            {'name': name, 'source': source,
                             'key': local_boot_key(kind), 'host': host.name})
                continue
            return self._render(host, kind, template, source)
        return NOT_FOUND

    def _render(self, host, kind, template, source):
        LOG.debug('Rendering %(kind)s template "%(name)s" (%(source)s) for '
                  'host %(host)s', {'kind': kind, 'name': template.name,
                                    'source': source, 'host': host.name})
        try:
            content = utils.render_template(
                template.template, build_template_params(host, kind),
                is_file=False)
        except jinja2.exceptions.TemplateError as e:
            raise exception.InvalidParameterValue(
                _('Template "%(name)s" could not be rendered for host '
                  '%(host)s: %(error)s') %
                {'name': template.name, 'host': host.name, 'error': e})
        return Resolution(content, source, template)
