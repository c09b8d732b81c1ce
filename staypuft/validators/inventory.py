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

from staypuft.errors import errors
from staypuft.validators.base import BasicValidator
from staypuft.validators.json_schema import inventory


class InventoryValidator(BasicValidator):

    schema = inventory.INVENTORY_SCHEMA

    @classmethod
    def validate(cls, data):
        super(InventoryValidator, cls).validate(data)
        cls._check_unique(data.get('subnets', []), 'id', 'subnet')
        cls._check_unique(data.get('hosts', []), 'id', 'host')
        cls._check_unique(data.get('hosts', []), 'name', 'host')
        return data

    @classmethod
    def _check_unique(cls, items, key, kind):
        seen = set()
        for item in items:
            if item[key] in seen:
                raise errors.InvalidData(
                    u"Duplicate {0} {1} '{2}'".format(kind, key, item[key]))
            seen.add(item[key])
