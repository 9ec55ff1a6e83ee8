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
Network boot loader kinds.

A host selects a loader file that its firmware downloads over TFTP. Every
loader file belongs to one loader kind, and each kind expects its own
configuration format published per MAC address on the boot proxy.
"""

import enum


class BootLoaderKind(enum.Enum):
    """Boot loaders that read a per-MAC configuration file."""

    PXELINUX = 'PXELinux'
    """SYSLINUX PXELINUX, legacy BIOS (and its EFI build)."""

    PXEGRUB = 'PXEGrub'
    """GRUB legacy, UEFI."""

    PXEGRUB2 = 'PXEGrub2'
    """GRUB 2, UEFI (optionally behind shim for Secure Boot)."""

    def __str__(self):
        return self.value


ALL = (BootLoaderKind.PXELINUX, BootLoaderKind.PXEGRUB,
       BootLoaderKind.PXEGRUB2)
"""Every kind, in the order a rebuild refreshes them."""

NONE = 'None'
"""Loader value meaning the host does not network boot."""

LOADER_FILES = {
    'PXELinux BIOS': 'pxelinux.0',
    'PXELinux UEFI': 'pxelinux.efi',
    'Grub UEFI': 'grub/bootx64.efi',
    'Grub2 UEFI': 'grub2/grubx64.efi',
    'Grub2 UEFI SecureBoot': 'grub2/shim.efi',
}
"""Human readable loader names and the file each one boots."""

# Longest prefix first, "grub/" must not shadow "grub2/".
_KIND_BY_PREFIX = (
    ('grub2/', BootLoaderKind.PXEGRUB2),
    ('grub/', BootLoaderKind.PXEGRUB),
    ('pxelinux', BootLoaderKind.PXELINUX),
)


def kind_for_loader(pxe_loader):
    """Return the loader kind of a loader file.

    :param pxe_loader: a loader file name such as ``grub2/grubx64.efi``,
        a human readable loader name from :data:`LOADER_FILES`, an empty
        string or ``None``.
    :returns: a :class:`BootLoaderKind`, or None when the host does not
        network boot or the loader is unknown.
    """
    if not pxe_loader or pxe_loader == NONE:
        return None
    pxe_loader = LOADER_FILES.get(pxe_loader, pxe_loader)
    for prefix, kind in _KIND_BY_PREFIX:
        if pxe_loader.startswith(prefix):
            return kind
    return None


def get_kind(value):
    """Coerce a kind name or a :class:`BootLoaderKind` to the enum.

    :raises: ValueError if the value names no kind.
    """
    if isinstance(value, BootLoaderKind):
        return value
    return BootLoaderKind(value)
