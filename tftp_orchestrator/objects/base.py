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

"""TFTP orchestration internal object model"""

from oslo_utils import versionutils
from oslo_versionedobjects import base as object_base
from oslo_versionedobjects import fields as object_fields

from tftp_orchestrator import objects


class OrchestratorObjectRegistry(object_base.VersionedObjectRegistry):
    def registration_hook(self, cls, index):
        # NOTE(danms): This is called when an object is registered,
        # and is responsible for maintaining tftp_orchestrator.objects.$OBJECT
        # as the highest-versioned implementation of a given object.
        version = versionutils.convert_version_to_tuple(cls.VERSION)
        if not hasattr(objects, cls.obj_name()):
            setattr(objects, cls.obj_name(), cls)
        else:
            cur_version = versionutils.convert_version_to_tuple(
                getattr(objects, cls.obj_name()).VERSION)
            if version >= cur_version:
                setattr(objects, cls.obj_name(), cls)


class OrchestratorObject(object_base.VersionedObject):
    """Base class and object factory.

    The orchestration core only reads these records. Persisting them is
    the job of the caller, so no object here implements ``get`` or
    ``save``. Fields that declare a default are populated on creation.
    """

    OBJ_SERIAL_NAMESPACE = 'tftp_orchestrator_object'
    OBJ_PROJECT_NAMESPACE = 'tftp_orchestrator'

    fields = {}

    def __init__(self, context=None, **kwargs):
        super(OrchestratorObject, self).__init__(context, **kwargs)
        unset = [name for name, field in self.fields.items()
                 if field.default != object_fields.UnspecifiedDefault
                 and not self.obj_attr_is_set(name)]
        if unset:
            self.obj_set_defaults(*unset)

    def as_dict(self):
        """Return the object represented as a dict.

        The returned object is JSON-serialisable.
        """

        def _attr_as_dict(field):
            """Return an attribute as a dict, handling nested objects."""
            attr = getattr(self, field)
            if isinstance(attr, OrchestratorObject):
                attr = attr.as_dict()
            elif isinstance(attr, list):
                attr = [a.as_dict() if isinstance(a, OrchestratorObject)
                        else a for a in attr]
            elif attr is not None and not isinstance(
                    attr, (str, int, bool, dict)):
                attr = str(attr)
            return attr

        return dict((k, _attr_as_dict(k))
                    for k in self.fields
                    if self.obj_attr_is_set(k))
