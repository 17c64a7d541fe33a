#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2013-2016 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#

"""Periodic issuing of band steering requests for a local node.

The scheduler is invoked once per measurement tick for each local node.
Only every ``ceil(steering_interval / tick_interval)`` ticks does it
actually consider the stations on the node. Each station that has been
flagged as actionable by the threshold tracker and is not within the
validity period of an earlier request is then sent a BSS transition
request, with the forcing determined by the station's aggressiveness:

    0, 1
        advisory request only

    2
        request with disassociation imminent; a kick is armed

    3 and above
        as for 2, with the disassociation timer counting down to the
        armed kick (in beacon intervals)
"""

import logging

import bsteer

from bsteer.constants import BAND_TYPE, BSS_TRANSITION_VALIDITY_MSECS
from bsteer.controller.target import has_any_target

log = logging.getLogger('bsteerscheduler')
"""The logger used for steering decisions, named ``bsteerscheduler``."""

# Aggressiveness at which a kick gets armed along with the request.
AGGRESSIVENESS_ARM_KICK = 2

# Aggressiveness at which the disassociation timer is communicated.
AGGRESSIVENESS_DISASSOC_TIMER = 3


def get_min_tick_count(config):
    """Number of measurement ticks per band steering firing.

    This is ``steering_interval / tick_interval`` rounded up.
    """
    return -(-config.steering_interval // config.tick_interval)


class SteeringScheduler(object):

    """Issue band steering requests for the stations of a node."""

    def __init__(self, policy, dispatcher):
        """Initialize the scheduler.

        Args:
            policy (:class:`SteeringPolicyIface`): provides the capacity
                check, roam eligibility and beacon interval lookups
            dispatcher (:class:`TransitionDispatcherIface`): the object to
                hand the transition requests to
        """
        self._policy = policy
        self._dispatcher = dispatcher

    def tick(self, local_node, all_local_nodes, config, now):
        """Run one measurement tick for the node.

        Args:
            local_node (:class:`Node`): the node whose stations to steer
            all_local_nodes (list of :class:`Node`): every local node
                (potential targets)
            config (:class:`SteeringConfig`): the steering tunables
            now (int): current time in msecs

        Returns:
            True if the stations were considered on this tick
        """
        if not config.steering_interval:
            return False

        # Nothing above 6 GHz to steer to.
        if local_node.band == BAND_TYPE.BAND_6G:
            return False

        if not has_any_target(local_node, all_local_nodes,
                              self._policy.node_below_max_assoc):
            return False

        local_node.steering_tick_counter += 1
        if local_node.steering_tick_counter < get_min_tick_count(config):
            return False

        local_node.steering_tick_counter = 0

        log.log(bsteer.LOG_LEVEL_DUMP, "Steering pass on %s",
                local_node.node_id)
        for station in local_node.get_stations():
            if not self._policy.can_perform_roam(station, now):
                continue

            self._steer_station(local_node, station, config, now)

        return True

    def _steer_station(self, local_node, station, config, now):
        """Send a request to a single station if it is due one.

        The actionable flag is always consumed, whichever way the station
        is handled.
        """
        state = station.band_steering
        try:
            if not state.below_snr:
                return

            if now < station.roam_request_validity_end:
                log.debug("Station %s still within validity period",
                          station.mac_addr)
                return

            if station.bss_transition_capable:
                self._send_request(local_node, station, config, now)
        finally:
            state.below_snr = False

    def _send_request(self, local_node, station, config, now):
        """Renew the validity window and dispatch the request."""
        beacon_interval = self._policy.get_beacon_interval(local_node)

        station.roam_request_validity_end = now + BSS_TRANSITION_VALIDITY_MSECS
        validity_period = BSS_TRANSITION_VALIDITY_MSECS // beacon_interval

        if station.aggressiveness >= AGGRESSIVENESS_ARM_KICK:
            kick_time = station.arm_kick(now + config.kick_delay)
            if station.aggressiveness >= AGGRESSIVENESS_DISASSOC_TIMER:
                disassoc_timer = max(0, int((kick_time - now) / beacon_interval))
            else:
                disassoc_timer = 0

            log.info("Band steering %s from %s (aggressiveness %d, "
                     "kick at %d)", station.mac_addr, local_node.node_id,
                     station.aggressiveness, kick_time)
            self._dispatcher.dispatch_transition_request(
                station, True, disassoc_timer, True, validity_period)
        else:
            log.info("Band steering %s from %s (advisory)", station.mac_addr,
                     local_node.node_id)
            self._dispatcher.dispatch_transition_request(
                station, False, 0, True, validity_period)


__all__ = ['SteeringScheduler', 'get_min_tick_count']
