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

"""Data formatting used by the deployment wizard views."""

from staypuft import consts


DEPLOYED_WARNING = (
    'Machines are already deployed with this configuration. Changing the '
    'configuration parameters is unsupported and may result in an '
    'unusable configuration. Please proceed with caution.')


def is_pxe(deployment, subnet):
    return consts.SUBNET_TYPES.PXE in deployment.subnet_types_for(subnet)


def subnet_type_names(deployment, subnet):
    """Subnet types bound to subnet, e.g. 'Management + Tenant'."""
    return ' + '.join(deployment.subnet_types_for(subnet))


def _identifiers_with_subnets(topology, host):
    host = topology.get_host(host) if isinstance(host, str) else host
    pairs = []
    if host.primary_interface:
        subnet = (topology.get_subnet(host.subnet_id)
                  if host.subnet_id is not None else None)
        pairs.append((host.primary_interface, subnet))
    for iface in topology.interfaces_of(host):
        pairs.append((iface.identifier, topology.subnet_of(iface)))
    return pairs


def host_nics(topology, host):
    return sorted(identifier for identifier, _ in
                  _identifiers_with_subnets(topology, host))


def host_nics_with_subnets(topology, host):
    return ['{0} ({1})'.format(identifier, subnet.name)
            for identifier, subnet in _identifiers_with_subnets(topology, host)
            if subnet is not None]


def deployed_warning(deployment, topology):
    if deployment.deployed(topology):
        return DEPLOYED_WARNING
    return None
