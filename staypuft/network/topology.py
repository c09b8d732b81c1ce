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

"""Read-only snapshot of the host inventory used for network resolution.

Subnets, hosts and interfaces are owned by the external inventory. A
Topology holds them in an arena: interfaces are addressed by (host,
identifier) and refer to their parent and bond members by identifier
only, so the attachment graph is explicit and checked once, when the
snapshot is built.
"""

from collections import OrderedDict

import netaddr

from staypuft import consts
from staypuft.errors import errors
from staypuft.logger import logger
from staypuft.network import utils
from staypuft.validators.inventory import InventoryValidator

# physical/bond -> vlan
MAX_ATTACHMENT_DEPTH = 2


class Subnet(object):

    def __init__(self, id, name, network, mask=None, vlanid=None,
                 gateway=None):
        self.id = id
        self.name = name
        if mask:
            network = '{0}/{1}'.format(network, mask)
        self.network = netaddr.IPNetwork(network)
        self.vlanid = vlanid
        self.gateway = gateway

    def has_vlanid(self):
        return self.vlanid is not None and self.vlanid != ''

    @property
    def network_address(self):
        return str(self.network.network)

    @property
    def mask(self):
        return str(self.network.netmask)

    @property
    def cidr(self):
        return str(self.network.cidr)

    def __eq__(self, other):
        return isinstance(other, Subnet) and self.id == other.id

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(('subnet', self.id))

    def __repr__(self):
        return '<Subnet {0} {1} ({2})>'.format(self.id, self.name, self.cidr)


class Interface(object):

    def __init__(self, identifier, subnet_id=None, ip=None, mac=None,
                 type=consts.NETWORK_INTERFACE_TYPES.ether,
                 attached_to=None, attached_devices=(), tag=None):
        if type not in consts.NETWORK_INTERFACE_TYPES:
            raise errors.InvalidInterfaceAttachment(
                u"Unknown type '{0}' of interface '{1}'".format(
                    type, identifier))
        self.identifier = identifier
        self.subnet_id = subnet_id
        self.ip = ip
        self.mac = utils.normalize_mac(mac)
        self.type = type
        self.attached_to = attached_to
        self.attached_devices = tuple(attached_devices or ())
        self.tag = tag
        # set when the interface is placed into a Topology
        self.host = None

    def is_bond(self):
        return self.type == consts.NETWORK_INTERFACE_TYPES.bond

    def is_vlan(self):
        return self.type == consts.NETWORK_INTERFACE_TYPES.vlan

    def __repr__(self):
        return '<Interface {0}:{1}>'.format(self.host, self.identifier)


class Host(object):

    def __init__(self, id, name, hostgroup=None, subnet_id=None, ip=None,
                 mac=None, primary_interface=None, deployed=False):
        self.id = id
        self.name = name
        self.hostgroup = hostgroup
        self.subnet_id = subnet_id
        self.ip = ip
        self.mac = utils.normalize_mac(mac)
        self.primary_interface = primary_interface
        self.deployed = deployed

    @property
    def fqdn(self):
        return self.name

    @property
    def shortname(self):
        return self.name.split('.')[0]

    def __repr__(self):
        return '<Host {0} {1}>'.format(self.id, self.name)


class Topology(object):
    """Inventory snapshot: subnets, hosts, their interfaces and VIP nics.

    :param subnets: iterable of Subnet
    :param hosts: iterable of Host
    :param interfaces: mapping of host name to an ordered iterable of
                       secondary Interface records
    :param vip_nics: iterable of Interface records carrying a VIP tag
    """

    def __init__(self, subnets=(), hosts=(), interfaces=None, vip_nics=()):
        self._subnets = OrderedDict((s.id, s) for s in subnets)
        self._hosts = OrderedDict()
        self._interfaces = {}

        for host in sorted(hosts, key=lambda h: h.id):
            if host.subnet_id is not None:
                self.get_subnet(host.subnet_id)
            self._hosts[host.name] = host
            self._interfaces[host.name] = OrderedDict()

        for host_name, host_interfaces in (interfaces or {}).items():
            host = self.get_host(host_name)
            arena = self._interfaces[host.name]
            for iface in host_interfaces:
                if iface.identifier in arena:
                    raise errors.InvalidInterfaceAttachment(
                        u"Duplicate interface '{0}' on host {1}".format(
                            iface.identifier, host.name))
                if iface.subnet_id is not None:
                    self.get_subnet(iface.subnet_id)
                iface.host = host.name
                arena[iface.identifier] = iface
            self._check_attachments(host.name)

        self._vip_nics = OrderedDict()
        for nic in vip_nics:
            if nic.tag in self._vip_nics:
                raise errors.InvalidInterfaceAttachment(
                    u"Duplicate VIP tag '{0}'".format(nic.tag))
            self._vip_nics[nic.tag] = nic

    def _check_attachments(self, host_name):
        arena = self._interfaces[host_name]
        depths = {}

        def depth(iface, path):
            if iface.identifier in depths:
                return depths[iface.identifier]
            if iface.identifier in path:
                raise errors.InvalidInterfaceAttachment(
                    u"Cyclic attachment of interface '{0}' on host "
                    u"{1}".format(iface.identifier, host_name))
            path = path + (iface.identifier,)

            children = list(iface.attached_devices)
            if iface.attached_to:
                children.append(iface.attached_to)
            level = 0
            for identifier in children:
                if identifier not in arena:
                    raise errors.InvalidInterfaceAttachment(
                        u"Interface '{0}' on host {1} is attached to "
                        u"unknown interface '{2}'".format(
                            iface.identifier, host_name, identifier))
                level = max(level, depth(arena[identifier], path) + 1)
            depths[iface.identifier] = level
            return level

        for iface in arena.values():
            if iface.attached_devices and not iface.is_bond():
                raise errors.InvalidInterfaceAttachment(
                    u"Only bonds aggregate devices, '{0}' on host {1} is "
                    u"{2}".format(iface.identifier, host_name, iface.type))
            if depth(iface, ()) > MAX_ATTACHMENT_DEPTH:
                raise errors.InvalidInterfaceAttachment(
                    u"Interface '{0}' on host {1} is nested deeper than "
                    u"{2} levels".format(
                        iface.identifier, host_name, MAX_ATTACHMENT_DEPTH))

    def _host(self, host):
        if isinstance(host, Host):
            return host
        return self.get_host(host)

    @property
    def hosts(self):
        return list(self._hosts.values())

    @property
    def subnets(self):
        return list(self._subnets.values())

    def get_host(self, name):
        try:
            return self._hosts[name]
        except KeyError:
            raise errors.HostNotFound(u"Host '{0}' not found".format(name))

    def get_subnet(self, subnet_id):
        try:
            return self._subnets[subnet_id]
        except KeyError:
            raise errors.SubnetNotFound(
                u"Subnet '{0}' not found".format(subnet_id))

    def hosts_of(self, hostgroup):
        """Hosts assigned to a hostgroup, ordered by id."""
        return [h for h in self._hosts.values() if h.hostgroup == hostgroup]

    def interfaces_of(self, host):
        host = self._host(host)
        return list(self._interfaces[host.name].values())

    def get_interface(self, host, identifier):
        host = self._host(host)
        return self._interfaces[host.name].get(identifier)

    def find_interface(self, host, subnet_id):
        """First secondary interface of host bound to subnet, or None."""
        for iface in self.interfaces_of(host):
            if iface.subnet_id == subnet_id:
                return iface
        return None

    def subnet_of(self, interface):
        if interface.subnet_id is None:
            return None
        return self.get_subnet(interface.subnet_id)

    def attached_parent(self, interface):
        if not interface.attached_to or interface.host is None:
            return None
        return self._interfaces[interface.host].get(interface.attached_to)

    def bonded_members(self, interface):
        """Members of a bond in declaration order, empty for other types."""
        if not interface.is_bond() or interface.host is None:
            return []
        arena = self._interfaces[interface.host]
        return [arena[identifier] for identifier in interface.attached_devices]

    def primary_binding(self, host):
        host = self._host(host)
        subnet = None
        if host.subnet_id is not None:
            subnet = self.get_subnet(host.subnet_id)
        return {'subnet': subnet,
                'ip': host.ip,
                'interface': host.primary_interface,
                'mac': host.mac}

    def vip_interfaces(self):
        return OrderedDict(self._vip_nics)

    @classmethod
    def from_dict(cls, data):
        """Build a Topology from an inventory document.

        :param data: dict with 'subnets', 'hosts' and 'vips' lists
        :raises: errors.InvalidData, errors.NetworkException
        """
        InventoryValidator.validate(data)

        subnets = [cls._build(cls._subnet_from_dict, 'subnet', s)
                   for s in data.get('subnets', [])]

        hosts = []
        interfaces = {}
        for h in data.get('hosts', []):
            hosts.append(cls._build(cls._host_from_dict, 'host', h))
            interfaces[h['name']] = [
                cls._build(cls._interface_from_dict, 'interface', i)
                for i in h.get('interfaces', [])
            ]

        vip_nics = [cls._build(cls._interface_from_dict, 'VIP nic', v)
                    for v in data.get('vips', [])]

        topology = cls(subnets, hosts, interfaces, vip_nics)
        logger.debug(u"Loaded topology: %d subnets, %d hosts, %d VIP nics",
                     len(subnets), len(hosts), len(vip_nics))
        return topology

    @classmethod
    def _build(cls, builder, kind, data):
        try:
            return builder(data)
        except (netaddr.AddrFormatError, ValueError) as exc:
            raise errors.InvalidData(
                u"Invalid {0} {1}: {2}".format(kind, data, exc))

    @classmethod
    def _subnet_from_dict(cls, data):
        return Subnet(
            data['id'], data.get('name', str(data['id'])), data['network'],
            mask=data.get('mask'),
            vlanid=data.get('vlanid'),
            gateway=data.get('gateway'))

    @classmethod
    def _host_from_dict(cls, data):
        return Host(
            data['id'], data['name'],
            hostgroup=data.get('hostgroup'),
            subnet_id=data.get('subnet'),
            ip=data.get('ip'),
            mac=data.get('mac'),
            primary_interface=data.get('primary_interface'),
            deployed=data.get('deployed', False))

    @classmethod
    def _interface_from_dict(cls, data):
        return Interface(
            data.get('identifier', data.get('tag')),
            subnet_id=data.get('subnet'),
            ip=data.get('ip'),
            mac=data.get('mac'),
            type=data.get('type', consts.NETWORK_INTERFACE_TYPES.ether),
            attached_to=data.get('attached_to'),
            attached_devices=data.get('attached_devices', ()),
            tag=data.get('tag'))
