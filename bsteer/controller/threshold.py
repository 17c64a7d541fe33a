#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2013-2015 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#

"""Adaptive per-station signal threshold.

The threshold starts at the first signal observed after association and
then ratchets down by one dB per measurement tick while the station's
signal stays below it. A station whose signal drops below either the
absolute floor or its own threshold plus the hysteresis margin is
flagged as actionable for the scheduler.
"""

import logging

from bsteer.constants import NO_SIGNAL
from bsteer.model.model_core import CONNECTION_STATE

log = logging.getLogger('bsteertracker')
"""The logger used for threshold updates, named ``bsteertracker``."""


class SignalThresholdTracker(object):

    """Update the band steering state of stations on each measurement."""

    def __init__(self, policy):
        """Initialize the tracker.

        Args:
            policy (:class:`SteeringPolicyIface`): provides the conversion
                from the configured minimum SNR to a signal floor
        """
        self._policy = policy

    def update(self, station, current_signal, node, config):
        """Fold one signal measurement into the station's state.

        Args:
            station (:class:`Station`): the station measured
            current_signal (int): the signal just measured, in dBm
            node (:class:`Node`): the node the station is associated to
            config (:class:`SteeringConfig`): the steering tunables
        """
        state = station.band_steering

        if station.connection_state == CONNECTION_STATE.NOT_CONNECTED:
            if state.threshold is not NO_SIGNAL:
                state.threshold = NO_SIGNAL
            return

        if state.threshold is NO_SIGNAL:
            state.threshold = current_signal
            log.debug("Station %s (%s) set threshold %d", station.mac_addr,
                      node.node_id, state.threshold)
            return

        if current_signal < state.threshold:
            state.threshold -= 1
            log.debug("Station %s (%s) reduce threshold %d, signal: %d",
                      station.mac_addr, node.node_id, state.threshold,
                      current_signal)

        floor = self._policy.snr_to_signal(node, config.min_snr)
        state.below_snr = current_signal < floor or \
            current_signal < state.threshold + config.signal_hysteresis_margin


__all__ = ['SignalThresholdTracker']
