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

import itertools
import unittest

from staypuft import consts
from staypuft.network.topology import Host
from staypuft.network.topology import Interface
from staypuft.network.topology import Subnet
from staypuft.network.topology import Topology
from staypuft.objects import Deployment


class EnvironmentManager(object):
    """Builds inventory snapshots and deployments for tests."""

    def __init__(self):
        self.subnets = []
        self.hosts = []
        self.interfaces = {}
        self.vip_nics = []
        self.deployments = []
        self._subnet_ids = itertools.count(1)
        self._host_ids = itertools.count(1)
        self._macs = itertools.count(1)

    def _next_mac(self):
        return '52:54:00:00:00:{0:02x}'.format(next(self._macs))

    def create_subnet(self, name, network, vlanid=None, gateway=None):
        subnet = Subnet(next(self._subnet_ids), name, network,
                        vlanid=vlanid, gateway=gateway)
        self.subnets.append(subnet)
        return subnet

    def create_interface(self, identifier, subnet=None, ip=None,
                         type=consts.NETWORK_INTERFACE_TYPES.ether,
                         attached_to=None, attached_devices=(), mac=None):
        return Interface(identifier,
                         subnet_id=subnet.id if subnet else None,
                         ip=ip,
                         mac=mac or self._next_mac(),
                         type=type,
                         attached_to=attached_to,
                         attached_devices=attached_devices)

    def create_host(self, name, hostgroup=None, subnet=None, ip=None,
                    primary_interface='eth0', deployed=False,
                    interfaces=()):
        host = Host(next(self._host_ids), name,
                    hostgroup=hostgroup,
                    subnet_id=subnet.id if subnet else None,
                    ip=ip,
                    mac=self._next_mac(),
                    primary_interface=primary_interface,
                    deployed=deployed)
        self.hosts.append(host)
        self.interfaces[name] = [
            iface if isinstance(iface, Interface)
            else self.create_interface(**iface)
            for iface in interfaces
        ]
        return host

    def create_vip(self, tag, ip, subnet=None):
        nic = Interface(tag, subnet_id=subnet.id if subnet else None,
                        ip=ip, tag=tag)
        self.vip_nics.append(nic)
        return nic

    def create_deployment(self, name='deployment', subnet_typings=None,
                          **kwargs):
        deployment = Deployment(name, **kwargs)
        for subnet_type, subnet in (subnet_typings or {}).items():
            deployment.assign_subnet(subnet_type, subnet)
        self.deployments.append(deployment)
        return deployment

    @property
    def topology(self):
        return Topology(self.subnets, self.hosts, self.interfaces,
                        self.vip_nics)


class BaseUnitTest(unittest.TestCase):
    """Staypuft base unittest."""


class BaseNetworkTest(BaseUnitTest):
    """Environment with PXE, management, public API, external and a
    VLAN tagged tenant subnet.
    """

    def setUp(self):
        super(BaseNetworkTest, self).setUp()
        self.env = EnvironmentManager()
        self.pxe = self.env.create_subnet('pxe', '192.0.2.0/24')
        self.management = self.env.create_subnet('mgmt', '10.0.0.0/24')
        self.public = self.env.create_subnet(
            'public', '198.51.100.0/24', gateway='198.51.100.1')
        self.external = self.env.create_subnet(
            'external', '203.0.113.0/24', gateway='203.0.113.1')
        self.tenant = self.env.create_subnet(
            'tenant', '172.16.0.0/24', vlanid=100)
