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

import datetime

import mock

from staypuft import consts
from staypuft.errors import errors
from staypuft.objects import DeploymentLocks
from staypuft.test.base import BaseNetworkTest

ST = consts.SUBNET_TYPES


class TestDeploymentLocks(BaseNetworkTest):

    def setUp(self):
        super(TestDeploymentLocks, self).setUp()
        self.locks = DeploymentLocks()
        self.deployment = self.env.create_deployment('openstack')
        self.other = self.env.create_deployment('other')

    def _expire(self, lock_id):
        for name, (lid, expiration, lock_type) in self.locks._locks.items():
            if lid == lock_id:
                self.locks._locks[name] = (
                    lid, expiration - datetime.timedelta(hours=1), lock_type)

    def test_acquire_conflict(self):
        self.locks.acquire_lock(self.deployment, 60)
        self.assertRaises(errors.CannotAcquireLock,
                          self.locks.acquire_lock, self.deployment, 60)
        self.locks.acquire_lock(self.other, 60)
        self.assertTrue(self.locks.locked(self.deployment))
        self.assertTrue(self.locks.locked(self.other))

    def test_release(self):
        lock_id = self.locks.acquire_lock(self.deployment, 60)
        self.locks.release_lock(lock_id)
        self.assertFalse(self.locks.locked(self.deployment))
        self.locks.release_lock(lock_id)
        self.locks.acquire_lock(self.deployment, 60)

    def test_expired_lock_can_be_taken(self):
        lock_id = self.locks.acquire_lock(self.deployment, 60)
        self._expire(lock_id)
        self.assertFalse(self.locks.locked(self.deployment))
        new_id = self.locks.acquire_lock(self.deployment, 60)
        self.assertNotEqual(lock_id, new_id)

    def test_drain_expired(self):
        lock_id = self.locks.acquire_lock(self.deployment, 60)
        self.locks.drain_expired(self.deployment)
        self.assertIn(self.deployment.name, self.locks._locks)
        self._expire(lock_id)
        self.locks.drain_expired(self.deployment)
        self.assertNotIn(self.deployment.name, self.locks._locks)

    def test_refresh(self):
        lock_id = self.locks.acquire_lock(
            self.deployment, datetime.timedelta(seconds=1))
        self.locks.refresh_lock(lock_id, 3600)
        expiration = self.locks._locks[self.deployment.name][1]
        self.assertGreater(
            expiration,
            datetime.datetime.now() + datetime.timedelta(minutes=30))

    def test_refresh_expired(self):
        lock_id = self.locks.acquire_lock(self.deployment, 60)
        self._expire(lock_id)
        self.assertRaises(errors.CannotRefreshLock,
                          self.locks.refresh_lock, lock_id, 60)
        self.assertRaises(errors.CannotRefreshLock,
                          self.locks.refresh_lock, 42, 60)

    def test_lock_type(self):
        self.locks.acquire_lock(self.deployment, 60)
        self.assertEqual(self.locks._locks[self.deployment.name][2],
                         consts.LOCK_TYPES.exclusive)

    def test_context_manager_releases_on_error(self):
        with self.assertRaises(RuntimeError):
            with self.locks.lock(self.deployment, 60):
                raise RuntimeError()
        self.assertFalse(self.locks.locked(self.deployment))

    @mock.patch('staypuft.objects.locks.logger')
    def test_logging(self, logger_mock):
        with self.locks.lock(self.deployment, 60):
            pass
        self.assertEqual(logger_mock.info.call_count, 2)

    def test_resolution_ignores_locks(self):
        host = self.env.create_host(
            'n1.example.com', hostgroup=consts.ROLES.compute_neutron,
            subnet=self.pxe, ip='192.0.2.20')
        self.deployment.assign_subnet(ST.PXE, self.pxe)
        topology = self.env.topology
        unlocked = self.deployment.network_query(topology).resolve(
            ST.PXE, host)
        with self.locks.lock(self.deployment, 60):
            locked = self.deployment.network_query(topology).resolve(
                ST.PXE, host)
        self.assertEqual(unlocked, locked)
