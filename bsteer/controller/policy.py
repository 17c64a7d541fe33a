#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2013-2015 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#

"""Policy hooks consulted by the band steering components.

This module exports the following:

    :class:`SteeringPolicyIface`
        interface for the capacity, roam eligibility, beacon interval
        and signal floor lookups

    :class:`DefaultSteeringPolicy`
        implementation based purely on the node and station state
"""

import logging

from bsteer.constants import DEFAULT_NOISE_FLOOR

log = logging.getLogger('bsteerpolicy')
"""The logger used for policy decisions, named ``bsteerpolicy``."""


class SteeringPolicyIface(object):

    """Interface for the lookups band steering depends on.

    These are owned by the general client steering policy rather than
    by band steering itself.
    """

    def __init__(self):
        """Initialize a new policy."""
        pass

    def node_below_max_assoc(self, node):
        """Determine whether the node has room for another station.

        raises :exc:NotImplementedError
            This method must be implemented by derived classes.
        """
        raise NotImplementedError("Derived classes must implement this method")

    def can_perform_roam(self, station, now):
        """Determine whether the station may be asked to roam right now.

        raises :exc:NotImplementedError
            This method must be implemented by derived classes.
        """
        raise NotImplementedError("Derived classes must implement this method")

    def get_beacon_interval(self, node):
        """Obtain the (positive) beacon interval of the node in TUs.

        raises :exc:NotImplementedError
            This method must be implemented by derived classes.
        """
        raise NotImplementedError("Derived classes must implement this method")

    def snr_to_signal(self, node, snr):
        """Convert an SNR on the node to the equivalent signal in dBm.

        raises :exc:NotImplementedError
            This method must be implemented by derived classes.
        """
        raise NotImplementedError("Derived classes must implement this method")


class DefaultSteeringPolicy(SteeringPolicyIface):

    """Policy that answers using only the model state."""

    def __init__(self, config):
        """Initialize the policy.

        Args:
            config (:class:`SteeringConfig`): provides the
                ``roam_trigger_interval`` used for roam eligibility
        """
        SteeringPolicyIface.__init__(self)

        self._config = config

    def node_below_max_assoc(self, node):
        """A node without a limit always has room."""
        return node.max_assoc == 0 or node.n_assoc < node.max_assoc

    def can_perform_roam(self, station, now):
        """Determine whether the station may be asked to roam right now.

        The station must be connected, have no kick pending, and have been
        connected for at least the roam trigger interval.

        Args:
            station (:class:`Station`): the station to check
            now (int): current time in msecs
        """
        if not station.is_connected:
            return False

        if station.kick_time is not None:
            log.debug("Station %s has a kick pending", station.mac_addr)
            return False

        if now - station.connected_since < self._config.roam_trigger_interval:
            return False

        return True

    def get_beacon_interval(self, node):
        return node.beacon_interval

    def snr_to_signal(self, node, snr):
        """Convert an SNR on the node to the equivalent signal in dBm.

        A negative value is already an absolute signal and is returned
        unchanged. Otherwise the SNR is relative to the node's noise
        floor (or a default floor if the node has not reported one).
        """
        if snr < 0:
            return snr

        noise = node.noise
        if noise is None:
            noise = DEFAULT_NOISE_FLOOR

        return noise + snr


__all__ = ['SteeringPolicyIface', 'DefaultSteeringPolicy']
