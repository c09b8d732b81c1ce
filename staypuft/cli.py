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

"""Query network bindings of a deployment environment.

The environment file is YAML with two sections: 'deployment' holds an
exported deployment, 'inventory' holds subnets, hosts and VIP nics.

Exit Codes:
success - 0
empty result - 1
configuration error - 2
"""

import argparse
import sys
import textwrap

from oslo_serialization import jsonutils

from staypuft import consts
from staypuft.errors import errors
from staypuft import logger as log
from staypuft.network.topology import Topology
from staypuft.objects import Deployment
from staypuft.objects.serializers import DeploymentSerializer
from staypuft.objects.serializers import HostSerializer
from staypuft.objects.serializers import SubnetSerializer
from staypuft.settings import settings
from staypuft.validators.base import BasicValidator


EXIT_OK = 0
EXIT_EMPTY = 1
EXIT_ERROR = 2


def serialize_binding(binding):
    if not binding:
        return {}
    data = dict(binding)
    if data.get('subnet') is not None:
        data['subnet'] = SubnetSerializer.serialize(data['subnet'])
    return data


class CmdApi(object):

    def __init__(self, out=None):
        self.out = out or sys.stdout
        self.parser = argparse.ArgumentParser(
            description=textwrap.dedent(__doc__),
            formatter_class=argparse.RawDescriptionHelpFormatter)
        self.subparser = self.parser.add_subparsers(
            title='actions',
            description='Supported actions',
            help='Provide of one valid actions')
        self.deployment = None
        self.topology = None
        self.register_options()
        self.register_actions()

    def register_options(self):
        self.parser.add_argument(
            '--file', '-f', dest='file', required=True,
            help='Path to environment file')
        self.parser.add_argument(
            '--config', '-c', dest='config', default=None,
            help='Path to configuration file')
        self.parser.add_argument(
            '--debug', '-d', dest='debug', action='store_true', default=None)

    def register_actions(self):
        host_arg = [(('host',), {'type': str})]
        self.register_parser('resolve', [(('role',), {'type': str})] +
                             host_arg)
        self.register_parser('gateway', host_arg)
        self.register_parser('tenant-interfaces', host_arg)
        self.register_parser('host-networks', host_arg)
        self.register_parser('vip', [(('name',), {'type': str})])
        self.register_parser('controllers')
        self.register_parser('export')
        self.register_parser('validate')

    def register_parser(self, action, arguments=()):
        parser = self.subparser.add_parser(action)
        parser.set_defaults(func=getattr(self, action.replace('-', '_')))
        for args, kwargs in arguments:
            parser.add_argument(*args, **kwargs)

    def parse(self, args):
        parsed = self.parser.parse_args(args)
        if not hasattr(parsed, 'func'):
            self.parser.error('no action given')
        if parsed.config:
            settings.update_from_file(parsed.config)
        if parsed.debug:
            log.set_level('debug')
        try:
            self.load(parsed.file)
            return parsed.func(parsed)
        except errors.StaypuftException as exc:
            log.logger.error(str(exc))
            return EXIT_ERROR

    def load(self, path):
        try:
            with open(path, 'r') as env_file:
                content = env_file.read()
        except IOError as exc:
            raise errors.InvalidData(
                u"Cannot read environment file {0}: {1}".format(
                    path, exc.strerror))
        data = BasicValidator.validate_yaml(content)
        if not isinstance(data, dict):
            raise errors.InvalidData("Environment must be a mapping")
        self.topology = Topology.from_dict(data.get('inventory') or {})
        self.deployment = Deployment.from_dict(data.get('deployment') or {})

    def query(self):
        return self.deployment.network_query(self.topology)

    def dump(self, data):
        self.out.write(jsonutils.dumps(data, indent=4, sort_keys=True))
        self.out.write('\n')
        return EXIT_OK if data else EXIT_EMPTY

    def resolve(self, args):
        return self.dump(serialize_binding(
            self.query().resolve(args.role, args.host)))

    def gateway(self, args):
        return self.dump(serialize_binding(
            self.query().resolve_gateway(args.host)))

    def tenant_interfaces(self, args):
        return self.dump(self.query().tenant_interfaces(args.host))

    def host_networks(self, args):
        return self.dump(self.query().host_networks(args.host))

    def vip(self, args):
        ip = self.query().resolve_vip(args.name)
        return self.dump({'name': args.name,
                          'subnet_type': consts.VIP_NAMES[args.name],
                          'ip': ip} if ip else {})

    def controllers(self, args):
        query = self.query()
        data = [HostSerializer.serialize(host) for host in query.controllers()]
        for host, lb, pcmk in zip(data,
                                  query.controller_lb_backend_shortnames(),
                                  query.controller_pcmk_shortnames()):
            host['lb_backend_shortname'] = lb
            host['pcmk_shortname'] = pcmk
        return self.dump(data)

    def export(self, args):
        return self.dump(DeploymentSerializer.serialize(self.deployment))

    def validate(self, args):
        self.deployment.validate()
        return self.dump({
            'deployment': self.deployment.name,
            'form_step': self.deployment.form_step,
            'unassigned_subnet_types':
                self.deployment.unassigned_subnet_types(),
            'unassigned_pxe_default_subnet_types':
                self.deployment.unassigned_pxe_default_subnet_types(),
            'deployed_warning':
                self.deployment.deployed_warning(self.topology),
        })


def main():
    api = CmdApi()
    exit_code = api.parse(sys.argv[1:])
    sys.exit(exit_code)
