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

from collections import OrderedDict

from staypuft import consts
from staypuft.errors import errors
from staypuft.helpers import deployed_warning
from staypuft.logger import logger
from staypuft.network import registry
from staypuft.network.query import NetworkQuery
from staypuft.network.topology import Subnet
from staypuft.objects.layout import Layout
from staypuft.settings import settings
from staypuft.validators.deployment import DeploymentValidator


class ServiceSettings(object):
    """Networking related settings of a deployment service."""

    def __init__(self, name, network_device_mtu=None):
        self.name = name
        self.network_device_mtu = network_device_mtu

    def set_defaults(self):
        defaults = (settings.SERVICE_DEFAULTS or {}).get(self.name) or {}
        self.network_device_mtu = defaults.get('network_device_mtu')

    def update(self, data):
        if 'network_device_mtu' in data:
            self.network_device_mtu = data['network_device_mtu']

    def to_dict(self):
        return {'network_device_mtu': self.network_device_mtu}


class Deployment(object):
    """An OpenStack deployment being configured by the wizard.

    The deployment owns its subnet typings: at most one subnet per
    subnet type. Subnets and hosts belong to the inventory and are
    referenced through a Topology snapshot.
    """

    CHOICES = {
        'amqp_provider': consts.AMQP_PROVIDERS,
        'networking': consts.NETWORKING,
        'layout_name': consts.LAYOUT_NAMES,
        'platform': consts.PLATFORMS,
        'form_step': consts.DEPLOYMENT_STEPS,
    }

    def __init__(self, name, description=None, amqp_provider=None,
                 layout_name=None, networking=None, platform=None,
                 custom_repos=None,
                 form_step=consts.DEPLOYMENT_STEPS.inactive):
        if not name:
            raise errors.InvalidDeploymentAttribute(
                "Deployment name can't be empty")
        defaults = settings.DEPLOYMENT_DEFAULTS or {}

        self.name = name
        self.description = description
        self.custom_repos = custom_repos
        self._layout = None
        self._attrs = {}
        self._subnet_typings = OrderedDict()
        self.amqp_provider = amqp_provider or defaults.get('amqp_provider')
        self.platform = platform or defaults.get('platform')
        self.form_step = form_step
        self._attrs['layout_name'] = self._check_choice(
            'layout_name', layout_name or defaults.get('layout_name'))
        self.networking = networking or defaults.get('networking')

        self.nova = ServiceSettings('nova')
        self.neutron = ServiceSettings('neutron')
        self.nova.set_defaults()
        self.neutron.set_defaults()

    def _check_choice(self, attr, value):
        if value not in self.CHOICES[attr]:
            raise errors.InvalidDeploymentAttribute(
                u"Invalid {0} '{1}', expected one of: {2}".format(
                    attr, value, ', '.join(self.CHOICES[attr])))
        return value

    def _set_attr(self, attr, value):
        self._attrs[attr] = self._check_choice(attr, value)

    @property
    def amqp_provider(self):
        return self._attrs['amqp_provider']

    @amqp_provider.setter
    def amqp_provider(self, value):
        self._set_attr('amqp_provider', value)

    @property
    def platform(self):
        return self._attrs['platform']

    @platform.setter
    def platform(self, value):
        self._set_attr('platform', value)

    @property
    def form_step(self):
        return self._attrs['form_step']

    @form_step.setter
    def form_step(self, value):
        self._set_attr('form_step', value)

    @property
    def layout_name(self):
        return self._attrs['layout_name']

    @layout_name.setter
    def layout_name(self, value):
        self._set_attr('layout_name', value)
        self._update_layout()

    @property
    def networking(self):
        return self._attrs['networking']

    @networking.setter
    def networking(self, value):
        self._set_attr('networking', value)
        self._update_layout()

    @property
    def layout(self):
        return self._layout

    def _update_layout(self):
        if 'networking' not in self._attrs:
            return
        self._layout = Layout.get(self.layout_name, self.networking)
        for name in list(self._subnet_typings):
            if not self._layout.has_subnet_type(name):
                logger.debug(u"Deployment %s: dropping '%s', not part of "
                             u"layout %r", self.name, name, self._layout)
                del self._subnet_typings[name]

    def ha(self):
        return self.layout_name == consts.LAYOUT_NAMES.HA

    def non_ha(self):
        return self.layout_name == consts.LAYOUT_NAMES.NON_HA

    def nova_networking(self):
        return self.networking == consts.NETWORKING.nova

    def neutron_networking(self):
        return self.networking == consts.NETWORKING.neutron

    def form_step_is_configuration(self):
        return self.form_step == consts.DEPLOYMENT_STEPS.configuration

    def form_step_is_past_configuration(self):
        return self.form_step_is_configuration() or self.form_complete()

    def form_complete(self):
        return self.form_step == consts.DEPLOYMENT_STEPS.complete

    def has_custom_repos(self):
        return bool(self.custom_repos and self.custom_repos.strip())

    def custom_repos_paths(self):
        if not self.has_custom_repos():
            return []
        return self.custom_repos.split("\n")

    # subnet typings

    def assign_subnet(self, subnet_type_name, subnet):
        """Bind a subnet to a subnet type, replacing a previous binding.

        :param subnet: Subnet instance or subnet id
        :raises: errors.UnknownRoleError, errors.InvalidRoleError
        """
        registry.get_subnet_type(subnet_type_name)
        if not self.layout.has_subnet_type(subnet_type_name):
            raise errors.InvalidRoleError(
                u"Invalid subnet type '{0}' for layout of deployment "
                u"{1}".format(subnet_type_name, self.name))
        subnet_id = subnet.id if isinstance(subnet, Subnet) else subnet
        previous = self._subnet_typings.get(subnet_type_name)
        if previous is not None and previous != subnet_id:
            logger.debug(u"Deployment %s: moving '%s' from subnet %s to %s",
                         self.name, subnet_type_name, previous, subnet_id)
        self._subnet_typings[subnet_type_name] = subnet_id

    def unassign_subnet(self, subnet_type_name):
        registry.get_subnet_type(subnet_type_name)
        self._subnet_typings.pop(subnet_type_name, None)

    def subnet_for(self, subnet_type_name):
        """Id of the subnet bound to subnet type, None when unassigned."""
        return self._subnet_typings.get(subnet_type_name)

    @property
    def subnet_typings(self):
        return OrderedDict(self._subnet_typings)

    def subnet_types_for(self, subnet):
        subnet_id = subnet.id if isinstance(subnet, Subnet) else subnet
        return [name for name, sid in self._subnet_typings.items()
                if sid == subnet_id]

    def unassigned_subnet_types(self):
        return [name for name in self.layout.subnet_types
                if name not in self._subnet_typings]

    def unassigned_pxe_default_subnet_types(self):
        return registry.pxe_default_subnet_types(
            self.unassigned_subnet_types())

    def missing_required_subnet_types(self):
        return registry.required_subnet_types(
            self.unassigned_subnet_types())

    def validate(self):
        """Validate the deployment for its current wizard step.

        :raises: errors.MissingRequiredSubnetTypes
        """
        if self.form_step == consts.DEPLOYMENT_STEPS.networking:
            missing = self.missing_required_subnet_types()
            if missing:
                raise errors.MissingRequiredSubnetTypes(
                    u"Some required subnet types are missing association "
                    u"of a subnet. Please drag and drop following types: "
                    u"{0}".format(', '.join(missing)))
        self.check_form_complete()

    def check_form_complete(self):
        if self.form_step == consts.DEPLOYMENT_STEPS.configuration:
            self.form_step = consts.DEPLOYMENT_STEPS.complete

    # hosts

    def controller_hostgroup(self):
        return self.layout.controller_role

    def ceph_hostgroup(self):
        if consts.ROLES.ceph_osd in self.layout.roles:
            return consts.ROLES.ceph_osd
        return None

    def hosts(self, topology):
        hosts = []
        for role in self.layout.roles:
            hosts.extend(topology.hosts_of(role))
        return hosts

    def is_compute_host(self, host, topology):
        return any(member.name == host.name
                   for role in consts.COMPUTE_ROLES
                   for member in topology.hosts_of(role))

    def deployed(self, topology):
        return any(host.deployed for host in self.hosts(topology))

    def hide_ceph_notification(self, topology):
        hostgroup = self.ceph_hostgroup()
        return hostgroup is None or not topology.hosts_of(hostgroup)

    def in_progress(self, locks):
        return locks.locked(self)

    def deployed_warning(self, topology):
        return deployed_warning(self, topology)

    def horizon_url(self, topology):
        query = self.network_query(topology)
        if self.ha():
            ip = query.resolve_vip('horizon_public_vip')
        else:
            ip = query.controller_ip(consts.SUBNET_TYPES.PUBLIC_API)
        if ip is None:
            return None
        return 'http://{0}'.format(ip)

    def network_query(self, topology, host=None):
        return NetworkQuery(self, topology, host)

    def jail(self, topology):
        return DeploymentJail(self, topology)

    @classmethod
    def from_dict(cls, data):
        """Build a deployment from its exported form.

        :raises: errors.InvalidData and the errors of assign_subnet
        """
        DeploymentValidator.validate(data)

        deployment = cls(
            data['name'],
            description=data.get('description'),
            amqp_provider=data.get('amqp_provider'),
            layout_name=data.get('layout_name'),
            networking=data.get('networking'),
            platform=data.get('platform'),
            custom_repos=data.get('custom_repos'),
            form_step=data.get('form_step', consts.DEPLOYMENT_STEPS.inactive))

        services = data.get('services', {})
        for name in consts.EXPORT_SERVICES:
            getattr(deployment, name).update(services.get(name, {}))

        for subnet_type_name, subnet_id in data.get(
                'subnet_typings', {}).items():
            deployment.assign_subnet(subnet_type_name, subnet_id)
        return deployment

    def __repr__(self):
        return '<Deployment {0}>'.format(self.name)


class DeploymentJail(object):
    """The part of Deployment exposed to configuration templates."""

    def __init__(self, deployment, topology):
        self._deployment = deployment
        self._topology = topology

    @property
    def amqp_provider(self):
        return self._deployment.amqp_provider

    @property
    def networking(self):
        return self._deployment.networking

    @property
    def layout_name(self):
        return self._deployment.layout_name

    @property
    def platform(self):
        return self._deployment.platform

    @property
    def nova(self):
        return self._deployment.nova

    @property
    def neutron(self):
        return self._deployment.neutron

    def nova_networking(self):
        return self._deployment.nova_networking()

    def neutron_networking(self):
        return self._deployment.neutron_networking()

    def ha(self):
        return self._deployment.ha()

    def non_ha(self):
        return self._deployment.non_ha()

    def hide_ceph_notification(self):
        return self._deployment.hide_ceph_notification(self._topology)

    def network_query(self):
        return self._deployment.network_query(self._topology).jail()

    def has_custom_repos(self):
        return self._deployment.has_custom_repos()

    def custom_repos_paths(self):
        return self._deployment.custom_repos_paths()
