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

import ast

from oslo_versionedobjects import fields as object_fields

from tftp_orchestrator.common import boot_loaders


class IntegerField(object_fields.IntegerField):
    pass


class StringField(object_fields.StringField):
    pass


class BooleanField(object_fields.BooleanField):
    pass


class MACAddressField(object_fields.MACAddressField):
    pass


class IPV4AddressField(object_fields.IPV4AddressField):
    pass


class IPV6AddressField(object_fields.IPV6AddressField):
    pass


class IPNetworkField(object_fields.IPNetworkField):
    pass


class ListOfStringsField(object_fields.ListOfStringsField):
    pass


class ObjectField(object_fields.ObjectField):
    pass


class ListOfObjectsField(object_fields.ListOfObjectsField):
    pass


class EnumField(object_fields.EnumField):
    pass


class FlexibleDict(object_fields.FieldType):
    @staticmethod
    def coerce(obj, attr, value):
        if isinstance(value, str):
            value = ast.literal_eval(value)
        return dict(value)


class FlexibleDictField(object_fields.AutoTypedField):
    AUTO_TYPE = FlexibleDict()

    def _null(self, obj, attr):
        if self.nullable:
            return {}
        super(FlexibleDictField, self)._null(obj, attr)


class BootLoaderKind(object_fields.Enum):
    ALL = tuple(kind.value for kind in boot_loaders.ALL)

    def __init__(self):
        super(BootLoaderKind, self).__init__(
            valid_values=BootLoaderKind.ALL)

    def coerce(self, obj, attr, value):
        if isinstance(value, boot_loaders.BootLoaderKind):
            value = value.value
        return super(BootLoaderKind, self).coerce(obj, attr, value)


class BootLoaderKindField(object_fields.BaseEnumField):
    AUTO_TYPE = BootLoaderKind()


class InterfaceType(object_fields.Enum):
    INTERFACE = 'interface'
    BOND = 'bond'

    ALL = (INTERFACE, BOND)

    def __init__(self):
        super(InterfaceType, self).__init__(valid_values=InterfaceType.ALL)


class InterfaceTypeField(object_fields.BaseEnumField):
    AUTO_TYPE = InterfaceType()


class OSFamily(object_fields.Enum):
    REDHAT = 'Redhat'
    SUSE = 'Suse'
    DEBIAN = 'Debian'

    ALL = (REDHAT, SUSE, DEBIAN)

    def __init__(self):
        super(OSFamily, self).__init__(valid_values=OSFamily.ALL)


class OSFamilyField(object_fields.BaseEnumField):
    AUTO_TYPE = OSFamily()
