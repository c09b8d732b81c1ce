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

import contextlib
import datetime
import itertools
import threading

from staypuft import consts
from staypuft.errors import errors
from staypuft.logger import logger


class DeploymentLocks(object):
    """Process local deploy locks keyed by deployment name.

    A lock expires after its timeout unless refreshed. Network resolution
    never takes these locks.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._ids = itertools.count(1)
        # deployment name -> (lock id, expiration, lock type)
        self._locks = {}

    def acquire_lock(self, deployment, timeout, lock_type=None):
        """Acquires lock for deployment.

        :param deployment: the Deployment instance
        :param timeout: the lock timeout, seconds or timedelta
        :param lock_type: the lock type, 'exclusive' is used by default
        :returns: lock id
        :raises: errors.CannotAcquireLock
        """
        logger.info('Try to lock deployment: "%s"', deployment.name)
        now = datetime.datetime.now()
        with self._guard:
            self._drain_expired(deployment.name, now)
            if deployment.name in self._locks:
                raise errors.CannotAcquireLock(
                    'The deployment has been locked already. '
                    'Deployment: "{0}"'.format(deployment.name))
            lock_id = next(self._ids)
            self._locks[deployment.name] = (
                lock_id,
                self._add_timedelta(now, timeout),
                lock_type or consts.LOCK_TYPES.exclusive)
        return lock_id

    def refresh_lock(self, lock_id, timeout):
        """Extends the lock expiration.

        :raises: errors.CannotRefreshLock
        """
        logger.info('Try to refresh lock: "%d"', lock_id)
        now = datetime.datetime.now()
        with self._guard:
            name = self._find(lock_id)
            if name is None or self._locks[name][1] < now:
                raise errors.CannotRefreshLock(
                    'The lock {0} was expired'.format(lock_id))
            _, _, lock_type = self._locks[name]
            self._locks[name] = (
                lock_id, self._add_timedelta(now, timeout), lock_type)

    def release_lock(self, lock_id):
        logger.info("Release the lock: %d", lock_id)
        with self._guard:
            name = self._find(lock_id)
            if name is not None:
                del self._locks[name]

    def drain_expired(self, deployment):
        """Cleans up expired locks of deployment."""
        with self._guard:
            self._drain_expired(deployment.name, datetime.datetime.now())

    def locked(self, deployment):
        now = datetime.datetime.now()
        with self._guard:
            lock = self._locks.get(deployment.name)
            return lock is not None and lock[1] >= now

    @contextlib.contextmanager
    def lock(self, deployment, timeout, lock_type=None):
        lock_id = self.acquire_lock(deployment, timeout, lock_type)
        try:
            yield lock_id
        finally:
            self.release_lock(lock_id)

    def _find(self, lock_id):
        for name, lock in self._locks.items():
            if lock[0] == lock_id:
                return name
        return None

    def _drain_expired(self, name, now):
        lock = self._locks.get(name)
        if lock is not None and lock[1] < now:
            del self._locks[name]

    @classmethod
    def _add_timedelta(cls, timestamp, delta):
        if not isinstance(delta, datetime.timedelta):
            delta = datetime.timedelta(seconds=delta)
        return timestamp + delta
