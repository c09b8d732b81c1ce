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

from .base import DeploymentException
from .base import LockException
from .base import ValidationException


class UnknownLayout(DeploymentException):
    message = "Layout not found"


class InvalidDeploymentAttribute(DeploymentException):
    message = "Invalid deployment attribute"


class MissingRequiredSubnetTypes(DeploymentException):
    message = ("Some required subnet types are missing association "
               "of a subnet")


class InvalidData(ValidationException):
    message = "Invalid data received"


class CannotAcquireLock(LockException):
    message = "Cannot acquire lock"


class CannotRefreshLock(LockException):
    message = "Cannot refresh lock"
