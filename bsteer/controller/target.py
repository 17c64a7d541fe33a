#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2013-2015 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#

"""Determine which nodes are valid band steering targets.

Band steering is progressive: a station on 2.4 GHz may only be steered
to 5 GHz, and a station on 5 GHz only to 6 GHz. Stations on 6 GHz are
already on the highest band and are never steered.

The capacity check is supplied by the caller as a callable taking the
candidate node (typically :meth:`SteeringPolicyIface.node_below_max_assoc`).
"""

import logging

from bsteer.constants import BAND_TYPE

log = logging.getLogger('bsteertarget')
"""The logger used for target selection, named ``bsteertarget``."""

# The only band a node on the key band may steer to.
NEXT_BAND = {
    BAND_TYPE.BAND_24G: BAND_TYPE.BAND_5G,
    BAND_TYPE.BAND_5G: BAND_TYPE.BAND_6G,
}


def is_target(current_node, candidate_node, capacity_check):
    """Determine whether the candidate node is a steering target.

    Args:
        current_node (:class:`Node`): the node the station is on
        candidate_node (:class:`Node`): the node being considered
        capacity_check (callable): returns True if the candidate node has
            room for another station

    Returns:
        True if stations on the current node may be band steered to the
        candidate node
    """
    if candidate_node is current_node:
        return False

    if current_node.ssid != candidate_node.ssid:
        return False

    if NEXT_BAND.get(current_node.band) != candidate_node.band:
        return False

    if not capacity_check(candidate_node):
        log.debug("Node %s is at capacity", candidate_node.node_id)
        return False

    return True


def has_any_target(current_node, all_local_nodes, capacity_check):
    """Determine whether any local node is a target for the current one."""
    return any(is_target(current_node, node, capacity_check)
               for node in all_local_nodes)


def will_steer(current_station_node, candidate_station_node, config,
               capacity_check):
    """Determine whether band steering would move a station between nodes.

    This is used by the general steering policy to recognize a roam
    that band steering would itself request.

    Args:
        current_station_node (:class:`Node`): the node serving the station
        candidate_station_node (:class:`Node`): the node the station may
            roam to
        config (:class:`SteeringConfig`): the steering tunables
        capacity_check (callable): returns True if a node has room for
            another station
    """
    if not config.steering_interval:
        return False

    if current_station_node.band == BAND_TYPE.BAND_6G:
        return False

    return is_target(current_station_node, candidate_station_node,
                     capacity_check)


__all__ = ['is_target', 'has_any_target', 'will_steer']
