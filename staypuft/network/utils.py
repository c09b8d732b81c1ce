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

import netaddr


def is_same_mac(mac1, mac2):
    """Check that two MACs are the same.

    It uses netaddr.EUI to represent MAC address. In case
    of wrong/unknown format of MAC address, raises ValueError
    """
    try:
        return netaddr.EUI(mac1) == netaddr.EUI(mac2)
    except netaddr.AddrFormatError as e:
        raise ValueError(e)


def normalize_mac(mac):
    """Render a MAC in the colon separated lowercase form, None passes."""
    if mac is None:
        return None
    try:
        eui = netaddr.EUI(mac)
    except netaddr.AddrFormatError as e:
        raise ValueError(e)
    eui.dialect = netaddr.mac_unix_expanded
    return str(eui)


def ip_in_subnet(ip, network):
    """Verifies that ip belongs to network.

    :param ip: example. 10.0.0.5
    :param network: example. 10.0.0.0/24, or netaddr.IPNetwork
    :returns: bool
    """
    return netaddr.IPAddress(ip) in netaddr.IPNetwork(network)


def get_ip_w_cidr_prefix_len(ip, network):
    """Return ip with the prefix length of its network: 10.0.0.5/24."""
    return '{0}/{1}'.format(ip, netaddr.IPNetwork(network).prefixlen)
