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

# Common json schema types definition

from staypuft import consts

NULL = {
    'type': 'null'
}

NULLABLE_STRING = {
    'type': ['string', 'null']
}

NON_NEGATIVE_INTEGER = {
    'type': 'integer',
    'minimum': 0
}

POSITIVE_INTEGER = {
    'type': 'integer',
    'minimum': 1
}

ID = POSITIVE_INTEGER

NULLABLE_ID = {
    'anyOf': [ID, NULL]
}

STRINGS_ARRAY = {
    'type': 'array',
    'items': {'type': 'string'}
}

IP_ADDRESS = {
    'type': 'string',
    'anyOf': [
        {'format': 'ipv4'},
        {'format': 'ipv6'},
    ]
}

NULLABLE_IP_ADDRESS = {
    'anyOf': [IP_ADDRESS, NULL]
}

MAC_ADDRESS = {
    'type': 'string',
    'pattern': '^([0-9a-fA-F]{2}[:-]){5}([0-9a-fA-F]{2})$',
}

NULLABLE_MAC_ADDRESS = {
    'anyOf': [MAC_ADDRESS, NULL]
}

VLAN_ID = {
    'type': 'integer',
    'minimum': 1,
    'maximum': 4094
}

NULLABLE_VLAN_ID = {
    'anyOf': [VLAN_ID, NULL]
}

INTERFACE_TYPE = {
    'type': 'string',
    'enum': list(consts.NETWORK_INTERFACE_TYPES)
}
