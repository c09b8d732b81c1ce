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
from staypuft.validators.json_schema import base_types


SUBNET = {
    'type': 'object',
    'required': ['id', 'network'],
    'properties': {
        'id': base_types.ID,
        'name': {'type': 'string'},
        'network': {'type': 'string'},
        'mask': base_types.NULLABLE_STRING,
        'vlanid': base_types.NULLABLE_VLAN_ID,
        'gateway': base_types.NULLABLE_IP_ADDRESS,
    },
}

INTERFACE = {
    'type': 'object',
    'required': ['identifier'],
    'properties': {
        'identifier': {'type': 'string', 'minLength': 1},
        'type': base_types.INTERFACE_TYPE,
        'subnet': base_types.NULLABLE_ID,
        'ip': base_types.NULLABLE_IP_ADDRESS,
        'mac': base_types.NULLABLE_MAC_ADDRESS,
        'attached_to': base_types.NULLABLE_STRING,
        'attached_devices': base_types.STRINGS_ARRAY,
        'tag': base_types.NULLABLE_STRING,
    },
}

HOST = {
    'type': 'object',
    'required': ['id', 'name'],
    'properties': {
        'id': base_types.ID,
        'name': {'type': 'string', 'minLength': 1},
        'hostgroup': base_types.NULLABLE_STRING,
        'subnet': base_types.NULLABLE_ID,
        'ip': base_types.NULLABLE_IP_ADDRESS,
        'mac': base_types.NULLABLE_MAC_ADDRESS,
        'primary_interface': base_types.NULLABLE_STRING,
        'deployed': {'type': 'boolean'},
        'interfaces': {
            'type': 'array',
            'items': INTERFACE,
        },
    },
}

VIP = {
    'type': 'object',
    'required': ['tag', 'ip'],
    'properties': {
        'tag': {'type': 'string', 'enum': list(consts.VIP_NAMES)},
        'identifier': {'type': 'string'},
        'subnet': base_types.NULLABLE_ID,
        'ip': base_types.IP_ADDRESS,
        'mac': base_types.NULLABLE_MAC_ADDRESS,
    },
}

INVENTORY_SCHEMA = {
    '$schema': 'http://json-schema.org/draft-04/schema#',
    'title': 'Inventory',
    'description': 'Subnets, hosts and VIP nics of an inventory snapshot',
    'type': 'object',
    'properties': {
        'subnets': {'type': 'array', 'items': SUBNET},
        'hosts': {'type': 'array', 'items': HOST},
        'vips': {'type': 'array', 'items': VIP},
    },
}
