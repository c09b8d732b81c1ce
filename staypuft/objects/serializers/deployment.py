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
from staypuft.objects.serializers.base import BasicSerializer


class DeploymentSerializer(BasicSerializer):

    fields = (
        'name',
        'description',
        'custom_repos',
        'form_step',
    ) + consts.EXPORT_PARAMS

    @classmethod
    def serialize(cls, instance, fields=None):
        data_dict = super(DeploymentSerializer, cls).serialize(
            instance, fields)
        if fields:
            return data_dict
        data_dict['services'] = dict(
            (name, getattr(instance, name).to_dict())
            for name in consts.EXPORT_SERVICES)
        data_dict['subnet_typings'] = dict(instance.subnet_typings)
        return data_dict


class SubnetSerializer(BasicSerializer):

    fields = (
        'id',
        'name',
        'network_address',
        'mask',
        'cidr',
        'vlanid',
        'gateway',
    )


class HostSerializer(BasicSerializer):

    fields = (
        'id',
        'name',
        'shortname',
        'hostgroup',
        'ip',
        'mac',
        'primary_interface',
        'deployed',
    )
