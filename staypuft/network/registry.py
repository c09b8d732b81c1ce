# -*- coding: utf-8 -*-

#    Copyright 2014 Red Hat, Inc.
#
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

"""Static registry of logical network roles (subnet types).

The set of names is fixed by :data:`staypuft.consts.SUBNET_TYPES`; the
flags of each role come from the ``SUBNET_TYPES`` section of settings.
"""

from collections import namedtuple

from staypuft import consts
from staypuft.errors import errors
from staypuft.settings import settings


SubnetType = namedtuple(
    'SubnetType',
    ('name', 'required', 'pxe_default', 'dedicated_subnet', 'vlan_required'))


def _flags(name):
    return (settings.SUBNET_TYPES or {}).get(name) or {}


def get_subnet_type(name):
    """Return the SubnetType for a role name.

    :param name: subnet type name, e.g. consts.SUBNET_TYPES.TENANT
    :raises: errors.UnknownRoleError
    """
    if name not in consts.SUBNET_TYPES:
        raise errors.UnknownRoleError(
            u"Unknown subnet type '{0}'".format(name))
    flags = _flags(name)
    return SubnetType(
        name=name,
        required=bool(flags.get('required', False)),
        pxe_default=bool(flags.get('pxe_default', False)),
        dedicated_subnet=bool(flags.get('dedicated_subnet', False)),
        vlan_required=bool(flags.get('vlan_required', False)))


def all_subnet_types():
    return [get_subnet_type(name) for name in consts.SUBNET_TYPES]


def role_requires_subnet(role):
    return get_subnet_type(role).required


def role_is_pxe_default(role):
    return get_subnet_type(role).pxe_default


def role_is_dedicated(role):
    return get_subnet_type(role).dedicated_subnet


def role_requires_vlan(role):
    return get_subnet_type(role).vlan_required


def required_subnet_types(names):
    """Filter a sequence of role names down to the required ones."""
    return [name for name in names if role_requires_subnet(name)]


def pxe_default_subnet_types(names):
    return [name for name in names if role_is_pxe_default(name)]
