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
from staypuft import helpers
from staypuft.test.base import BaseNetworkTest

ST = consts.SUBNET_TYPES


class TestHelpers(BaseNetworkTest):

    def setUp(self):
        super(TestHelpers, self).setUp()
        self.host = self.env.create_host(
            'n1.example.com', hostgroup=consts.ROLES.compute_neutron,
            subnet=self.pxe, ip='192.0.2.20',
            interfaces=[
                {'identifier': 'eth2'},
                {'identifier': 'eth1', 'subnet': self.management,
                 'ip': '10.0.0.20'},
            ])
        self.deployment = self.env.create_deployment(
            subnet_typings={ST.PXE: self.pxe,
                            ST.MANAGEMENT: self.management,
                            ST.TENANT: self.management})

    def test_is_pxe(self):
        self.assertTrue(helpers.is_pxe(self.deployment, self.pxe))
        self.assertFalse(helpers.is_pxe(self.deployment, self.management))

    def test_subnet_type_names(self):
        self.assertEqual(
            helpers.subnet_type_names(self.deployment, self.management),
            'Management + Tenant')
        self.assertEqual(
            helpers.subnet_type_names(self.deployment, self.public), '')

    def test_host_nics(self):
        topology = self.env.topology
        self.assertEqual(helpers.host_nics(topology, self.host),
                         ['eth0', 'eth1', 'eth2'])
        self.assertEqual(
            helpers.host_nics_with_subnets(topology, 'n1.example.com'),
            ['eth0 (pxe)', 'eth1 (mgmt)'])

    def test_deployed_warning(self):
        self.assertIsNone(
            helpers.deployed_warning(self.deployment, self.env.topology))
        self.host.deployed = True
        self.assertEqual(
            helpers.deployed_warning(self.deployment, self.env.topology),
            helpers.DEPLOYED_WARNING)
