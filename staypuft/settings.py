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

import os

import yaml

from staypuft import consts
from staypuft import logger as log
from staypuft.logger import logger


class StaypuftSettings(object):
    def __init__(self):
        settings_files = []
        project_path = os.path.dirname(__file__)
        project_settings_file = os.path.join(project_path, 'settings.yaml')
        settings_files.append(project_settings_file)
        settings_files.append(consts.SETTINGS_FILE)

        custom_config = os.environ.get('STAYPUFT_CONFIG')
        if custom_config:
            settings_files.append(custom_config)

        self.config = {}
        for sf in settings_files:
            if not os.path.exists(sf):
                logger.debug("Config file %s does not exist, skipping", sf)
                continue
            try:
                logger.debug("Trying to read config file %s", sf)
                self.update_from_file(sf)
            except (IOError, yaml.YAMLError) as e:
                logger.error("Error while reading config file %s: %s",
                             sf, str(e))

        loglevel = self.config.get("APP_LOGLEVEL")
        if isinstance(loglevel, str):
            log.set_level(loglevel)

    def update(self, dct):
        self.config.update(dct)

    def update_from_file(self, path):
        with open(path, "r") as custom_config:
            self.config.update(
                yaml.safe_load(custom_config.read()) or {}
            )

    def dump(self):
        return yaml.safe_dump(self.config, default_flow_style=False)

    def __getattr__(self, name):
        return self.config.get(name, None)

    def __repr__(self):
        return "<settings object>"


settings = StaypuftSettings()
