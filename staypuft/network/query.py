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

"""Per-host network role resolution for a deployment.

A NetworkQuery answers, for a host and a logical subnet type, which
subnet, interface, IP and MAC are in effect. Every call is a pure
function of the deployment configuration and the topology snapshot.
An unassigned role resolves to an empty dict, never to an error.
"""

from staypuft import consts
from staypuft.errors import errors
from staypuft.logger import logger
from staypuft.network import registry
from staypuft.network import utils


def _always(query, host):
    return True


def _nova_compute_host(query, host):
    return (query.deployment.nova_networking() and
            query.deployment.is_compute_host(host, query.topology))


class NetworkQuery(object):

    # (tier name, condition, subnet type), highest priority first
    GATEWAY_TIERS = (
        ('public_api', _always, consts.SUBNET_TYPES.PUBLIC_API),
        ('pxe', _always, consts.SUBNET_TYPES.PXE),
        ('nova_compute_external', _nova_compute_host,
         consts.SUBNET_TYPES.EXTERNAL),
    )

    def __init__(self, deployment, topology, host=None):
        self.deployment = deployment
        self.topology = topology
        self.host = host

    def _host(self, host):
        host = host if host is not None else self.host
        if host is None:
            raise ValueError("no host specified")
        if isinstance(host, str):
            host = self.topology.get_host(host)
        return host

    def resolve(self, subnet_type_name, host=None):
        """Resolve the interface bound to a subnet type on a host.

        :param subnet_type_name: name from consts.SUBNET_TYPES
        :param host: Host instance or name, defaults to the query host
        :returns: dict with subnet, interface, ip and mac keys, or an
                  empty dict when the subnet type has no subnet assigned
                  or the host has no interface on it
        :raises: errors.UnknownRoleError, errors.InvalidRoleError
        """
        host = self._host(host)
        registry.get_subnet_type(subnet_type_name)

        layout = self.deployment.layout
        if not layout.has_subnet_type(subnet_type_name):
            raise errors.InvalidRoleError(
                u"Invalid subnet type '{0}' for layout of deployment "
                u"{1}".format(subnet_type_name, self.deployment.name))

        subnet_id = self.deployment.subnet_for(subnet_type_name)
        if subnet_id is None:
            logger.debug(u"Subnet type '%s' is not assigned in deployment "
                         u"%s", subnet_type_name, self.deployment.name)
            return {}
        subnet = self.topology.get_subnet(subnet_id)

        if host.subnet_id == subnet.id:
            return self.topology.primary_binding(host)

        iface = self.topology.find_interface(host, subnet.id)
        if iface is not None:
            return {'subnet': subnet,
                    'ip': iface.ip,
                    'interface': iface.identifier,
                    'mac': iface.mac}
        return {}

    def ip_for_host(self, subnet_type_name, host=None):
        return self.resolve(subnet_type_name, host).get('ip')

    def interface_for_host(self, subnet_type_name, host=None):
        return self.resolve(subnet_type_name, host).get('interface')

    def subnet_for_host(self, subnet_type_name, host=None):
        return self.resolve(subnet_type_name, host).get('subnet')

    def network_address_for_host(self, subnet_type_name, host=None):
        subnet = self.subnet_for_host(subnet_type_name, host)
        if subnet is not None:
            return subnet.network_address

    def tenant_interfaces(self, host=None):
        """Interfaces carrying tenant traffic, top level first.

        For a VLAN tagged tenant subnet the VLAN interface is followed by
        its parent, and a bonded parent by its members in declaration
        order.
        """
        host = self._host(host)
        binding = self.resolve(consts.SUBNET_TYPES.TENANT, host)
        if not binding:
            return []

        identifiers = [binding['interface']]
        subnet = binding['subnet']
        top_level = self.topology.get_interface(host, binding['interface'])
        if top_level is None or not subnet.has_vlanid():
            return identifiers

        parent = self.topology.attached_parent(top_level)
        if parent is None:
            return identifiers
        identifiers.append(parent.identifier)
        identifiers.extend(
            member.identifier
            for member in self.topology.bonded_members(parent))
        return identifiers

    def tenant_interface(self, interface, host=None):
        return interface in self.tenant_interfaces(host)

    def tenant_subnet(self, subnet, host=None):
        return subnet == self.subnet_for_host(
            consts.SUBNET_TYPES.TENANT, host)

    def mtu_for_tenant_subnet(self):
        if self.deployment.neutron_networking():
            return self.deployment.neutron.network_device_mtu
        return self.deployment.nova.network_device_mtu

    def gateway_tiers(self, host=None):
        """Gateway tiers that apply to host, highest priority first."""
        host = self._host(host)
        return [(name, subnet_type)
                for name, condition, subnet_type in self.GATEWAY_TIERS
                if condition(self, host)]

    def resolve_gateway(self, host=None):
        """Resolve the interface holding the default route of a host.

        :returns: binding dict of the first applicable tier with a
                  subnet, or an empty dict
        """
        host = self._host(host)
        layout = self.deployment.layout
        for name, subnet_type in self.gateway_tiers(host):
            if not layout.has_subnet_type(subnet_type):
                continue
            binding = self.resolve(subnet_type, host)
            if binding.get('subnet') is not None:
                logger.debug(u"Gateway of %s resolved by tier '%s'",
                             host.name, name)
                return binding
        logger.debug(u"No gateway resolved for %s", host.name)
        return {}

    def gateway_subnet(self, host=None):
        return self.resolve_gateway(host).get('subnet')

    def gateway_interface(self, host=None):
        return self.resolve_gateway(host).get('interface')

    def gateway_interface_mac(self, host=None):
        return self.resolve_gateway(host).get('mac')

    def host_networks(self, host=None):
        """Render every bound layout subnet type of a host."""
        host = self._host(host)
        networks = []
        for subnet_type in self.deployment.layout.subnet_types:
            binding = self.resolve(subnet_type, host)
            if not binding:
                continue
            subnet = binding['subnet']
            network = {
                'name': subnet_type,
                'cidr': subnet.cidr,
                'vlan': subnet.vlanid,
                'netmask': subnet.mask,
                'gateway': subnet.gateway,
                'dev': binding['interface'],
                'mac': binding['mac'],
                'ip': None,
            }
            if binding['ip']:
                network['ip'] = utils.get_ip_w_cidr_prefix_len(
                    binding['ip'], subnet.network)
            networks.append(network)
        return networks

    @staticmethod
    def vip_subnet_type(vip_name):
        try:
            return consts.VIP_NAMES[vip_name]
        except KeyError:
            raise errors.UnknownVipError(
                u"Unknown VIP name '{0}'".format(vip_name))

    def resolve_vip(self, vip_name):
        """IP of the VIP nic tagged vip_name, None if not configured.

        :raises: errors.UnknownVipError
        """
        self.vip_subnet_type(vip_name)
        nic = self.topology.vip_interfaces().get(vip_name)
        if nic is None:
            logger.debug(u"VIP '%s' is not configured", vip_name)
            return None
        return nic.ip

    def controllers(self):
        hostgroup = self.deployment.controller_hostgroup()
        if hostgroup is None:
            return []
        return self.topology.hosts_of(hostgroup)

    def controller_ips(self, subnet_type_name):
        return [self.ip_for_host(subnet_type_name, controller)
                for controller in self.controllers()]

    def controller_ip(self, subnet_type_name):
        ips = self.controller_ips(subnet_type_name)
        return ips[0] if ips else None

    def controller_fqdns(self):
        return [controller.fqdn for controller in self.controllers()]

    def controller_shortnames(self):
        return [controller.shortname for controller in self.controllers()]

    def controller_lb_backend_shortnames(self):
        return [consts.LB_BACKEND_PREFIX + shortname
                for shortname in self.controller_shortnames()]

    def controller_pcmk_shortnames(self):
        return [consts.PCMK_PREFIX + shortname
                for shortname in self.controller_shortnames()]

    def jail(self):
        return NetworkQueryJail(self)


class NetworkQueryJail(object):
    """The part of NetworkQuery exposed to configuration templates."""

    def __init__(self, query):
        self._query = query

    def resolve(self, subnet_type_name, host=None):
        return self._query.resolve(subnet_type_name, host)

    def ip_for_host(self, subnet_type_name, host=None):
        return self._query.ip_for_host(subnet_type_name, host)

    def interface_for_host(self, subnet_type_name, host=None):
        return self._query.interface_for_host(subnet_type_name, host)

    def network_address_for_host(self, subnet_type_name, host=None):
        return self._query.network_address_for_host(subnet_type_name, host)

    def subnet_for_host(self, subnet_type_name, host=None):
        return self._query.subnet_for_host(subnet_type_name, host)

    def tenant_interfaces(self, host=None):
        return self._query.tenant_interfaces(host)

    def interfaces_for_tenant_subnet(self, host=None):
        return self._query.tenant_interfaces(host)

    def tenant_interface(self, interface, host=None):
        return self._query.tenant_interface(interface, host)

    def tenant_subnet(self, subnet, host=None):
        return self._query.tenant_subnet(subnet, host)

    def mtu_for_tenant_subnet(self):
        return self._query.mtu_for_tenant_subnet()

    def resolve_gateway(self, host=None):
        return self._query.resolve_gateway(host)

    def gateway_subnet(self, host=None):
        return self._query.gateway_subnet(host)

    def gateway_interface(self, host=None):
        return self._query.gateway_interface(host)

    def gateway_interface_mac(self, host=None):
        return self._query.gateway_interface_mac(host)

    def resolve_vip(self, vip_name):
        return self._query.resolve_vip(vip_name)

    def get_vip(self, vip_name):
        return self._query.resolve_vip(vip_name)

    def controller_ip(self, subnet_type_name):
        return self._query.controller_ip(subnet_type_name)

    def controller_ips(self, subnet_type_name):
        return self._query.controller_ips(subnet_type_name)

    def controller_fqdns(self):
        return self._query.controller_fqdns()

    def controller_shortnames(self):
        return self._query.controller_shortnames()

    def controller_pcmk_shortnames(self):
        return self._query.controller_pcmk_shortnames()

    def controller_lb_backend_shortnames(self):
        return self._query.controller_lb_backend_shortnames()
