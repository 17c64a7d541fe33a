#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2013-2016 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#

"""Import the system config from a file and create the model elements.

The configuration file format is a simple YAML representation of the
local nodes and the stations associated to them, along with the band
steering tunables. The two main entry points are
:func:`create_node_db_from_config_data`, which constructs the fully
populated :class:`NodeDB`, and :func:`create_steering_config_from_config_data`,
which constructs the immutable :class:`SteeringConfig`.
"""

from collections import namedtuple

import bsteer  # for config helper
from bsteer.constants import DEFAULT_BEACON_INTERVAL, BAND_TYPE
from bsteer.model.model_core import Node, NodeDB, Station

SteeringConfig = namedtuple('SteeringConfig',
                            ['steering_interval', 'tick_interval', 'min_snr',
                             'signal_hysteresis_margin', 'kick_delay',
                             'roam_trigger_interval'])
"""The band steering tunables.

All times are in msecs. A ``steering_interval`` of 0 disables band
steering. ``tick_interval`` is the measurement cadence at which the
threshold tracker and scheduler are invoked. ``min_snr`` is either an SNR
(in dB, when non-negative) or an absolute signal (in dBm, when
negative) below which a station is always actionable.
"""

DEFAULT_STEERING_CONFIG = SteeringConfig(steering_interval=120000,
                                         tick_interval=1000,
                                         min_snr=-60,
                                         signal_hysteresis_margin=5,
                                         kick_delay=10000,
                                         roam_trigger_interval=60000)


def _check_int(name, value, minimum=None):
    """Confirm the config value is an integer no smaller than the minimum."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("Steering option '%s' must be an integer (got %r)" %
                         (name, value))
    if minimum is not None and value < minimum:
        raise ValueError("Steering option '%s' must be at least %d (got %d)" %
                         (name, minimum, value))


def create_steering_config(**kwargs):
    """Construct a :class:`SteeringConfig`, starting from the defaults.

    Any option not provided keeps its default value.

    Raises:
        :class:`ValueError` if an option is unknown or has an invalid value
    """
    unknown = set(kwargs) - set(SteeringConfig._fields)
    if unknown:
        raise ValueError("Unexpected steering option(s): %s" %
                         ', '.join(sorted(unknown)))

    config = DEFAULT_STEERING_CONFIG._replace(**kwargs)

    _check_int('steering_interval', config.steering_interval, 0)
    _check_int('tick_interval', config.tick_interval, 1)
    _check_int('min_snr', config.min_snr)
    _check_int('signal_hysteresis_margin', config.signal_hysteresis_margin)
    _check_int('kick_delay', config.kick_delay, 0)
    _check_int('roam_trigger_interval', config.roam_trigger_interval, 0)

    return config


def create_steering_config_from_config_data(data):
    """Construct the :class:`SteeringConfig` from the ``steering`` section.

    Args:
        data (dict): the steering section of the config file (or None to
            use all defaults)
    """
    return create_steering_config(**(data or {}))


def create_stations(node, station_specs):
    """Create :class:`Station` objects based on the data provided.

    The stations are attached to the node after creation. They are not
    connected until the caller associates them.

    Args:
        node (:class:`Node`): the node which owns the stations
        station_specs (dict): the key is the MAC address of the station
            and the value is a dictionary with the optional
            ``bss_transition`` and ``aggressiveness`` keys
    """
    for mac_addr, attrs in (station_specs or {}).items():
        if not isinstance(mac_addr, str):
            raise ValueError("MAC address for station on node '%s' " %
                             node.node_id +
                             "is not a string; add quotes around it")

        attrs = attrs or {}
        station = Station(mac_addr,
                          bss_transition_capable=bool(
                              attrs.get('bss_transition', False)),
                          aggressiveness=attrs.get('aggressiveness', 0))
        node.add_station(station)


def create_nodes(node_db, node_specs):
    """Create :class:`Node` objects based on the data provided.

    The nodes are added to the database after creation.

    Args:
        node_db (:class:`NodeDB`): the database into which to put the
            created objects
        node_specs (dict): the key is the node identifier and the value
            is a dictionary with the ``ssid`` and ``freq`` keys, the
            optional ``beacon_interval``, ``noise`` and ``max_assoc``
            keys, and an optional ``stations`` dictionary
    """
    for name, attrs in node_specs.items():
        if 'ssid' not in attrs:
            raise ValueError("ssid missing for node '%s'" % name)

        if 'freq' not in attrs:
            raise ValueError("freq missing for node '%s'" % name)

        node = Node(name, str(attrs['ssid']), attrs['freq'],
                    beacon_interval=attrs.get('beacon_interval',
                                              DEFAULT_BEACON_INTERVAL),
                    noise=attrs.get('noise'),
                    max_assoc=attrs.get('max_assoc', 0))
        if node.band == BAND_TYPE.BAND_INVALID:
            raise ValueError("Unexpected frequency %r for node '%s'" %
                             (attrs['freq'], name))

        create_stations(node, attrs.get('stations'))
        node_db.add_node(node)


def create_node_db_from_config_data(data):
    """Construct and return a :class:`NodeDB` object from the model data."""
    node_db = NodeDB()
    create_nodes(node_db, data['nodes'])
    return node_db


def create_node_db_from_yaml(filename):
    """Construct a :class:`NodeDB` object based on the file.

    Args:
        filename (str): the YAML file containing the definitions of the
            system elements
    """
    data = bsteer.read_config_file(filename)
    return create_node_db_from_config_data(data['model'])


__all__ = ['SteeringConfig', 'DEFAULT_STEERING_CONFIG',
           'create_steering_config', 'create_steering_config_from_config_data',
           'create_node_db_from_config_data', 'create_node_db_from_yaml']
