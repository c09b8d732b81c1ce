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


SERVICE = {
    'type': 'object',
    'properties': {
        'network_device_mtu': {
            'anyOf': [base_types.POSITIVE_INTEGER, base_types.NULL]
        },
    },
}

DEPLOYMENT_SCHEMA = {
    '$schema': 'http://json-schema.org/draft-04/schema#',
    'title': 'Deployment',
    'description': 'Exported deployment configuration',
    'type': 'object',
    'required': ['name'],
    'properties': {
        'name': {'type': 'string', 'minLength': 1},
        'description': base_types.NULLABLE_STRING,
        'amqp_provider': {'enum': list(consts.AMQP_PROVIDERS)},
        'networking': {'enum': list(consts.NETWORKING)},
        'layout_name': {'enum': list(consts.LAYOUT_NAMES)},
        'platform': {'enum': list(consts.PLATFORMS)},
        'custom_repos': base_types.NULLABLE_STRING,
        'form_step': {'enum': list(consts.DEPLOYMENT_STEPS)},
        'services': {
            'type': 'object',
            'properties': dict(
                (name, SERVICE) for name in consts.EXPORT_SERVICES),
        },
        'subnet_typings': {
            'type': 'object',
            'additionalProperties': base_types.ID,
        },
    },
}
