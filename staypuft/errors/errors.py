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

from staypuft.errors.base import DeploymentException
from staypuft.errors.base import LockException
from staypuft.errors.base import NetworkException
from staypuft.errors.base import StaypuftException
from staypuft.errors.base import ValidationException

from staypuft.errors.deployment import CannotAcquireLock
from staypuft.errors.deployment import CannotRefreshLock
from staypuft.errors.deployment import InvalidData
from staypuft.errors.deployment import InvalidDeploymentAttribute
from staypuft.errors.deployment import MissingRequiredSubnetTypes
from staypuft.errors.deployment import UnknownLayout

from staypuft.errors.network import HostNotFound
from staypuft.errors.network import InvalidInterfaceAttachment
from staypuft.errors.network import InvalidRoleError
from staypuft.errors.network import SubnetNotFound
from staypuft.errors.network import UnknownRoleError
from staypuft.errors.network import UnknownVipError


__all__ = [
    'CannotAcquireLock',
    'CannotRefreshLock',
    'DeploymentException',
    'HostNotFound',
    'InvalidData',
    'InvalidDeploymentAttribute',
    'InvalidInterfaceAttachment',
    'InvalidRoleError',
    'LockException',
    'MissingRequiredSubnetTypes',
    'NetworkException',
    'StaypuftException',
    'SubnetNotFound',
    'UnknownLayout',
    'UnknownRoleError',
    'UnknownVipError',
    'ValidationException',
]
