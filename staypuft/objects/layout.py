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

from staypuft import consts
from staypuft.errors import errors
from staypuft.settings import settings


class Layout(object):
    """Subnet types and roles of a (layout name, networking) pair."""

    def __init__(self, name, networking, subnet_types, roles):
        self.name = name
        self.networking = networking
        self.subnet_types = tuple(subnet_types)
        self.roles = tuple(roles)

    @classmethod
    def get(cls, name, networking):
        """Look the layout up in settings.

        :raises: errors.UnknownLayout
        """
        by_networking = (settings.LAYOUTS or {}).get(name) or {}
        data = by_networking.get(networking)
        if data is None:
            raise errors.UnknownLayout(
                u"Layout '{0}' with {1} networking not found".format(
                    name, networking))
        return cls(name, networking,
                   data.get('subnet_types', []), data.get('roles', []))

    def has_subnet_type(self, subnet_type_name):
        return subnet_type_name in self.subnet_types

    def deploy_order(self, role):
        return self.roles.index(role) + 1

    def _first_role(self, candidates):
        for role in self.roles:
            if role in candidates:
                return role
        return None

    @property
    def controller_role(self):
        return self._first_role(consts.CONTROLLER_ROLES)

    @property
    def compute_roles(self):
        return [role for role in self.roles if role in consts.COMPUTE_ROLES]

    def __repr__(self):
        return '<Layout {0} ({1})>'.format(self.name, self.networking)
