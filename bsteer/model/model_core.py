#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2013-2016 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#

"""Core representation of the band steering state.

System state consists of a set of local nodes (one per radio interface
serving an SSID). Each node operates on a specific frequency and can
have 0 or more stations associated to it.

This module exports the following:

    :class:`BandSteeringState`
        the adaptive signal threshold and actionable flag of a station

    :class:`Station`
        a client device associated to a specific node

    :class:`Node`
        a single local interface, operating on a specific frequency

    :class:`NodeDB`
        registry of local nodes and their stations
"""

# Standard Python imports
import logging
from collections import OrderedDict

# Imports from other components
from enum import Enum

from bsteer.constants import NO_SIGNAL, DEFAULT_BEACON_INTERVAL
from bsteer.constants import get_band_for_freq

CONNECTION_STATE = Enum('CONNECTION_STATE', [('NOT_CONNECTED', 0),
                                             ('CONNECTED', 1)])

log = logging.getLogger('bsteermodel')
"""The logger used for model operations, named ``bsteermodel``."""


class BandSteeringState(object):

    """Per-station state maintained for band steering decisions.

    The threshold tracks the best signal the station has recently
    sustained on its current node. The ``below_snr`` flag is raised when
    the station falls into the actionable zone and is consumed by the
    scheduler.
    """

    def __init__(self):
        """Initialize with no threshold established."""
        self.threshold = NO_SIGNAL
        self.below_snr = False

    def reset(self):
        """Return to the state of a freshly associated station."""
        self.threshold = NO_SIGNAL
        self.below_snr = False

    @property
    def has_threshold(self):
        return self.threshold is not NO_SIGNAL


class Station(object):

    """Current state for a station associated to a node.

    The station holds a back-reference to the node that owns it. This is
    only used for lookups; the node is the owner of the station.
    """

    def __init__(self, mac_addr, bss_transition_capable=False,
                 aggressiveness=0):
        """Initialize a new (not yet connected) station.

        Args:
            mac_addr (str): MAC address of the station as a
                colon-separated hexadecimal string
            bss_transition_capable (bool): whether the station supports
                802.11v BSS Transition Management
            aggressiveness (int): how forcefully the station should be
                pushed to a higher band (0 and 1 are advisory only, 2
                arms a kick, 3 and above also sends a countdown)
        """
        if aggressiveness < 0:
            raise ValueError("Aggressiveness for station '%s' must not be "
                             "negative" % mac_addr)

        self._mac_addr = mac_addr.lower()  # canonical form
        self._node = None

        self.bss_transition_capable = bss_transition_capable
        self.aggressiveness = aggressiveness

        self.connection_state = CONNECTION_STATE.NOT_CONNECTED
        self.connected_since = None
        self.signal = NO_SIGNAL
        self.roam_request_validity_end = 0
        self.kick_time = None
        self.band_steering = BandSteeringState()

    def associate(self, now):
        """Mark the station as connected as of the time provided.

        Args:
            now (int): current time in msecs
        """
        if self.connection_state == CONNECTION_STATE.CONNECTED:
            return

        self.connection_state = CONNECTION_STATE.CONNECTED
        self.connected_since = now

    def disassociate(self):
        """Mark the station as no longer connected.

        The steering state and the last measurement are discarded so that
        a later association starts from its own first sample.
        """
        self.connection_state = CONNECTION_STATE.NOT_CONNECTED
        self.connected_since = None
        self.signal = NO_SIGNAL
        self.band_steering.reset()
        self.clear_kick()

    def update_signal(self, signal):
        """Record the latest signal measurement (in dBm)."""
        self.signal = signal

    def arm_kick(self, kick_time):
        """Arm a forced disassociation unless one is already armed.

        Returns:
            the time of the armed kick (which is the existing one if a
            kick was already armed)
        """
        if self.kick_time is None:
            self.kick_time = kick_time
        return self.kick_time

    def clear_kick(self):
        self.kick_time = None

    def _set_node(self, node):
        self._node = node

    @property
    def mac_addr(self):
        return self._mac_addr

    @property
    def node(self):
        return self._node

    @property
    def is_connected(self):
        return self.connection_state == CONNECTION_STATE.CONNECTED

    def __repr__(self):
        return "Station(%s)" % self._mac_addr


class Node(object):

    """A local interface serving an SSID on a specific frequency.

    Stations are kept in association order. That order is the order in
    which the scheduler considers them.
    """

    def __init__(self, node_id, ssid, freq,
                 beacon_interval=DEFAULT_BEACON_INTERVAL, noise=None,
                 max_assoc=0):
        """Initialize a new node.

        Args:
            node_id (str): identifier that is unique across all nodes
            ssid (str): the SSID being served
            freq (int): the operating frequency in MHz
            beacon_interval (int): beacon interval in TUs (must be
                positive)
            noise (int): the measured noise floor in dBm, or None if
                unknown
            max_assoc (int): maximum number of associated stations, or 0
                for no limit
        """
        self._node_id = node_id
        self._ssid = ssid
        self._freq = freq
        self._band = get_band_for_freq(freq)
        self._noise = noise
        self._max_assoc = max_assoc
        self._stations = OrderedDict()

        self._beacon_interval = None
        self.update_beacon_interval(beacon_interval)

        self.steering_tick_counter = 0

    def update_beacon_interval(self, beacon_interval):
        """Change the beacon interval (in TUs).

        Raises:
            :class:`ValueError` if the interval is not positive
        """
        if beacon_interval is None or beacon_interval <= 0:
            raise ValueError("Beacon interval for node '%s' must be positive "
                             "(got %r)" % (self._node_id, beacon_interval))
        self._beacon_interval = beacon_interval

    def update_noise(self, noise):
        self._noise = noise

    def add_station(self, station):
        """Attach a station to this node.

        Do nothing if the station has already been added before.

        Args:
            station (:class:`Station`): the station to attach

        Raises:
            :class:`ValueError` if the station is attached to another node
        """
        if station.mac_addr in self._stations:
            return

        if station.node is not None and station.node is not self:
            raise ValueError("Station %s is already attached to node '%s'" %
                             (station.mac_addr, station.node.node_id))

        station._set_node(self)
        self._stations[station.mac_addr] = station

    def del_station(self, mac_addr):
        """Detach the station with the given MAC address.

        Returns:
            the :class:`Station` removed, or None if there is no such
            station
        """
        station = self._stations.pop(mac_addr.lower(), None)
        if station is not None:
            station._set_node(None)
        return station

    def get_station(self, mac_addr):
        return self._stations.get(mac_addr.lower(), None)

    def get_stations(self):
        """Obtain a list of the attached stations in association order."""
        return list(self._stations.values())

    @property
    def node_id(self):
        return self._node_id

    @property
    def ssid(self):
        return self._ssid

    @property
    def freq(self):
        return self._freq

    @property
    def band(self):
        return self._band

    @property
    def beacon_interval(self):
        return self._beacon_interval

    @property
    def noise(self):
        return self._noise

    @property
    def max_assoc(self):
        return self._max_assoc

    @property
    def n_assoc(self):
        """Number of attached stations that are currently connected."""
        return len([sta for sta in self._stations.values() if sta.is_connected])

    def __repr__(self):
        return "Node(%s, %s, %d MHz)" % (self._node_id, self._ssid, self._freq)


class NodeDB(object):

    """A registry of local nodes, indexed by unique identifiers."""

    def __init__(self):
        """Initialize an empty node database."""
        self._registered_nodes = OrderedDict()

    def add_node(self, node):
        """Add a node to the database.

        Args:
            node (:class:`Node`): the node object to add

        Raises:
            :class:`ValueError` if there already is a registered node
            with the same identifier
        """
        if node.node_id in self._registered_nodes:
            raise ValueError("Node IDs must be unique")

        self._registered_nodes[node.node_id] = node

    def get_node(self, node_id):
        """Look up the node using its identifier.

        Returns a :class:`Node` instance, or ``None`` if there is no node
        matching that identifier.
        """
        return self._registered_nodes.get(node_id, None)

    def get_nodes(self):
        """Obtain a list of all registered nodes in registration order."""
        return list(self._registered_nodes.values())

    def get_station(self, mac_addr):
        """Find the station with the given MAC address on any node.

        Returns a :class:`Station` instance, or ``None`` if no node has a
        station with that address.
        """
        for node in self._registered_nodes.values():
            station = node.get_station(mac_addr)
            if station is not None:
                return station

        return None

    def move_station(self, mac_addr, node_id, now):
        """Re-attach a station to a different node (eg. after a roam).

        The station keeps its capabilities but its steering state starts
        from scratch on the new node, as for a fresh association at the
        time provided.

        Returns:
            the :class:`Station` moved

        Raises:
            :class:`ValueError` if the station or node is unknown
        """
        station = self.get_station(mac_addr)
        if station is None:
            raise ValueError("Unknown station %s" % mac_addr)

        node = self.get_node(node_id)
        if node is None:
            raise ValueError("Unknown node '%s'" % node_id)

        if station.node is node:
            return station

        log.debug("Moving station %s from %s to %s", station.mac_addr,
                  station.node.node_id, node_id)
        station.node.del_station(station.mac_addr)
        station.disassociate()
        station.band_steering.reset()
        station.roam_request_validity_end = 0
        node.add_station(station)
        station.associate(now)
        return station

    def __len__(self):
        return len(self._registered_nodes)


__all__ = ['CONNECTION_STATE', 'BandSteeringState', 'Station', 'Node',
           'NodeDB']
