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

import io
import os
import tempfile

import mock
from oslo_serialization import jsonutils
import yaml

from staypuft import cli
from staypuft.test.base import BaseUnitTest


ENVIRONMENT = {
    'deployment': {
        'name': 'openstack',
        'networking': 'neutron',
        'layout_name': 'Controller / Compute',
        'subnet_typings': {
            'Provisioning/PXE': 1,
            'Public API': 2,
            'Tenant': 3,
        },
    },
    'inventory': {
        'subnets': [
            {'id': 1, 'name': 'pxe', 'network': '192.0.2.0/24'},
            {'id': 2, 'name': 'public', 'network': '198.51.100.0/24',
             'gateway': '198.51.100.1'},
            {'id': 3, 'name': 'tenant', 'network': '172.16.0.0/24',
             'vlanid': 100},
        ],
        'hosts': [
            {'id': 1, 'name': 'c1.example.com',
             'hostgroup': 'Controller (Neutron)', 'subnet': 1,
             'ip': '192.0.2.10', 'mac': '52:54:00:00:00:01',
             'primary_interface': 'eth0',
             'interfaces': [
                 {'identifier': 'eth1', 'subnet': 2,
                  'ip': '198.51.100.10'},
                 {'identifier': 'eth2'},
                 {'identifier': 'eth2.100', 'type': 'vlan',
                  'attached_to': 'eth2', 'subnet': 3,
                  'ip': '172.16.0.10'},
             ]},
        ],
        'vips': [],
    },
}


class TestCmdApi(BaseUnitTest):

    def setUp(self):
        super(TestCmdApi, self).setUp()
        fd, self.path = tempfile.mkstemp(suffix='.yaml')
        with os.fdopen(fd, 'w') as f:
            f.write(yaml.safe_dump(ENVIRONMENT))
        self.out = io.StringIO()
        self.api = cli.CmdApi(out=self.out)

    def tearDown(self):
        os.remove(self.path)
        super(TestCmdApi, self).tearDown()

    def run_action(self, *args):
        code = self.api.parse(['-f', self.path] + list(args))
        output = self.out.getvalue()
        return code, jsonutils.loads(output) if output else None

    def test_resolve(self):
        code, data = self.run_action('resolve', 'Public API',
                                     'c1.example.com')
        self.assertEqual(code, cli.EXIT_OK)
        self.assertEqual(data['interface'], 'eth1')
        self.assertEqual(data['ip'], '198.51.100.10')
        self.assertEqual(data['subnet']['cidr'], '198.51.100.0/24')

    def test_resolve_unassigned_is_empty(self):
        code, data = self.run_action('resolve', 'Management',
                                     'c1.example.com')
        self.assertEqual(code, cli.EXIT_EMPTY)
        self.assertEqual(data, {})

    def test_gateway(self):
        code, data = self.run_action('gateway', 'c1.example.com')
        self.assertEqual(code, cli.EXIT_OK)
        self.assertEqual(data['subnet']['gateway'], '198.51.100.1')

    def test_tenant_interfaces(self):
        code, data = self.run_action('tenant-interfaces', 'c1.example.com')
        self.assertEqual(code, cli.EXIT_OK)
        self.assertEqual(data, ['eth2.100', 'eth2'])

    def test_host_networks(self):
        code, data = self.run_action('host-networks', 'c1.example.com')
        self.assertEqual(code, cli.EXIT_OK)
        self.assertEqual([n['name'] for n in data],
                         ['Provisioning/PXE', 'Public API', 'Tenant'])
        self.assertEqual(data[2]['ip'], '172.16.0.10/24')
        self.assertEqual(data[2]['vlan'], 100)

    def test_vip_not_configured(self):
        code, data = self.run_action('vip', 'db_vip')
        self.assertEqual(code, cli.EXIT_EMPTY)
        self.assertEqual(data, {})

    def test_controllers(self):
        code, data = self.run_action('controllers')
        self.assertEqual(code, cli.EXIT_OK)
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]['shortname'], 'c1')
        self.assertEqual(data[0]['pcmk_shortname'], 'pcmk-c1')
        self.assertEqual(data[0]['lb_backend_shortname'], 'lb-backend-c1')

    def test_export(self):
        code, data = self.run_action('export')
        self.assertEqual(code, cli.EXIT_OK)
        self.assertEqual(data['subnet_typings']['Tenant'], 3)
        self.assertEqual(data['platform'], 'rhel7')

    def test_validate(self):
        code, data = self.run_action('validate')
        self.assertEqual(code, cli.EXIT_OK)
        self.assertIsNone(data['deployed_warning'])
        self.assertNotIn('Tenant', data['unassigned_subnet_types'])

    @mock.patch('staypuft.cli.log.logger')
    def test_errors_exit_with_configuration_error(self, logger_mock):
        for args in (('vip', 'no_such_vip'),
                     ('resolve', 'Backup', 'c1.example.com'),
                     ('gateway', 'missing.example.com')):
            self.assertEqual(self.api.parse(['-f', self.path] + list(args)),
                             cli.EXIT_ERROR)
        self.assertEqual(logger_mock.error.call_count, 3)

    @mock.patch('staypuft.cli.log.logger')
    def test_invalid_environment(self, logger_mock):
        with open(self.path, 'w') as f:
            f.write('deployment: {}\n')
        self.assertEqual(self.api.parse(['-f', self.path, 'export']),
                         cli.EXIT_ERROR)

    @mock.patch('staypuft.cli.log.set_level')
    def test_debug(self, set_level_mock):
        self.run_action('-d', 'export')
        set_level_mock.assert_called_once_with('debug')

    @mock.patch('staypuft.cli.log.logger')
    def test_missing_environment_file(self, logger_mock):
        missing = self.path + '.missing'
        self.assertEqual(self.api.parse(['-f', missing, 'export']),
                         cli.EXIT_ERROR)
        self.assertIn(missing, logger_mock.error.call_args[0][0])

    @mock.patch('staypuft.cli.log.logger')
    def test_malformed_subnet(self, logger_mock):
        environment = dict(ENVIRONMENT)
        environment['inventory'] = dict(
            ENVIRONMENT['inventory'],
            subnets=[{'id': 1, 'name': 'pxe', 'network': 'bogus'}])
        with open(self.path, 'w') as f:
            f.write(yaml.safe_dump(environment))
        self.assertEqual(self.api.parse(['-f', self.path, 'controllers']),
                         cli.EXIT_ERROR)
        self.assertEqual(self.out.getvalue(), '')
