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

from collections import namedtuple
from collections import OrderedDict


def Enum(*values, **kwargs):
    names = kwargs.get('names')
    if names:
        return namedtuple('Enum', names)(*values)
    return namedtuple('Enum', values)(*values)


SUBNET_TYPES = Enum(
    'Provisioning/PXE',
    'External',
    'Public API',
    'Admin API',
    'Management',
    'Cluster Management',
    'Storage',
    'Storage Clustering',
    'Tenant',
    names=(
        'PXE',
        'EXTERNAL',
        'PUBLIC_API',
        'ADMIN_API',
        'MANAGEMENT',
        'CLUSTER_MGMT',
        'STORAGE',
        'STORAGE_CLUSTERING',
        'TENANT',
    )
)

NETWORKING = Enum(
    'nova',
    'neutron'
)

LAYOUT_NAMES = Enum(
    'Controller / Compute',
    'High Availability Controllers / Compute',
    names=(
        'NON_HA',
        'HA',
    )
)

AMQP_PROVIDERS = Enum(
    'rabbitmq',
    'qpid'
)

PLATFORMS = Enum(
    'rhel7',
    'rhel6'
)

DEPLOYMENT_STEPS = Enum(
    'inactive',
    'settings',
    'networking',
    'overview',
    'configuration',
    'complete'
)

ROLES = Enum(
    'Controller (Nova)',
    'Controller (Neutron)',
    'HA Controller',
    'Compute (Nova)',
    'Compute (Neutron)',
    'Ceph Storage Node (OSD)',
    names=(
        'controller_nova',
        'controller_neutron',
        'ha_controller',
        'compute_nova',
        'compute_neutron',
        'ceph_osd',
    )
)

CONTROLLER_ROLES = (
    ROLES.controller_nova,
    ROLES.controller_neutron,
    ROLES.ha_controller,
)

COMPUTE_ROLES = (
    ROLES.compute_nova,
    ROLES.compute_neutron,
)

LOCK_TYPES = Enum(
    'exclusive',
)

NETWORK_INTERFACE_TYPES = Enum(
    'ether',
    'bond',
    'vlan'
)

# parameters carried by deployment import/export
EXPORT_PARAMS = ('amqp_provider', 'networking', 'layout_name', 'platform')
EXPORT_SERVICES = ('nova', 'neutron')

LB_BACKEND_PREFIX = 'lb-backend-'
PCMK_PREFIX = 'pcmk-'

VIP_NAMES = OrderedDict((
    ('ceilometer_admin_vip', SUBNET_TYPES.ADMIN_API),
    ('ceilometer_private_vip', SUBNET_TYPES.MANAGEMENT),
    ('ceilometer_public_vip', SUBNET_TYPES.PUBLIC_API),
    ('cinder_admin_vip', SUBNET_TYPES.ADMIN_API),
    ('cinder_private_vip', SUBNET_TYPES.MANAGEMENT),
    ('cinder_public_vip', SUBNET_TYPES.PUBLIC_API),
    ('db_vip', SUBNET_TYPES.MANAGEMENT),
    ('glance_admin_vip', SUBNET_TYPES.ADMIN_API),
    ('glance_private_vip', SUBNET_TYPES.MANAGEMENT),
    ('glance_public_vip', SUBNET_TYPES.PUBLIC_API),
    ('heat_admin_vip', SUBNET_TYPES.ADMIN_API),
    ('heat_private_vip', SUBNET_TYPES.MANAGEMENT),
    ('heat_public_vip', SUBNET_TYPES.PUBLIC_API),
    ('heat_cfn_admin_vip', SUBNET_TYPES.ADMIN_API),
    ('heat_cfn_private_vip', SUBNET_TYPES.MANAGEMENT),
    ('heat_cfn_public_vip', SUBNET_TYPES.PUBLIC_API),
    ('horizon_admin_vip', SUBNET_TYPES.ADMIN_API),
    ('horizon_private_vip', SUBNET_TYPES.MANAGEMENT),
    ('horizon_public_vip', SUBNET_TYPES.PUBLIC_API),
    ('keystone_admin_vip', SUBNET_TYPES.ADMIN_API),
    ('keystone_private_vip', SUBNET_TYPES.MANAGEMENT),
    ('keystone_public_vip', SUBNET_TYPES.PUBLIC_API),
    ('loadbalancer_vip', SUBNET_TYPES.PUBLIC_API),
    ('neutron_admin_vip', SUBNET_TYPES.ADMIN_API),
    ('neutron_private_vip', SUBNET_TYPES.MANAGEMENT),
    ('neutron_public_vip', SUBNET_TYPES.PUBLIC_API),
    ('nova_admin_vip', SUBNET_TYPES.ADMIN_API),
    ('nova_private_vip', SUBNET_TYPES.MANAGEMENT),
    ('nova_public_vip', SUBNET_TYPES.PUBLIC_API),
    ('amqp_vip', SUBNET_TYPES.MANAGEMENT),
    ('swift_public_vip', SUBNET_TYPES.PUBLIC_API),
))

SETTINGS_FILE = '/etc/staypuft/settings.yaml'
