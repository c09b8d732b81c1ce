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

import jsonschema
from oslo_serialization import jsonutils
import yaml

from staypuft.errors import errors


class BasicValidator(object):

    schema = None

    @classmethod
    def validate_json(cls, data):
        if not data:
            raise errors.InvalidData(
                "Empty data received",
                log_message=True
            )
        try:
            return jsonutils.loads(data)
        except ValueError:
            raise errors.InvalidData(
                "Invalid json received",
                log_message=True
            )

    @classmethod
    def validate_yaml(cls, data):
        if not data:
            raise errors.InvalidData(
                "Empty data received",
                log_message=True
            )
        try:
            return yaml.safe_load(data)
        except yaml.YAMLError as exc:
            raise errors.InvalidData(
                "Invalid yaml received: {0}".format(exc),
                log_message=True
            )

    @classmethod
    def validate_schema(cls, data, schema):
        """Validate a given data with a given schema.

        :param data:   a data to validate represented as a dict
        :param schema: a schema to validate represented as a dict;
                       must be in JSON Schema Draft 4 format.
        """
        try:
            checker = jsonschema.FormatChecker()
            jsonschema.validate(data, schema, format_checker=checker)
        except jsonschema.ValidationError as exc:
            if len(exc.path) > 0:
                raise errors.InvalidData(
                    ": ".join([
                        "/".join(str(p) for p in exc.path), exc.message]))
            raise errors.InvalidData(exc.message)

    @classmethod
    def validate(cls, data):
        cls.validate_schema(data, cls.schema)
        return data
