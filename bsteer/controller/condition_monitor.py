#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2013-2016 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#

import logging

from bsteer.constants import NO_SIGNAL

"""Classes that periodically act on the band steering state.

Currently this module exports the following monitors:

    :class:`BandSteeringMonitor`
        on every measurement interval, updates the signal threshold of
        each station and then runs the band steering scheduler for each
        local node
"""

log = logging.getLogger('bsteermonitor')
"""The logger used for condition monitor classes, named ``bsteermonitor``."""


class ConditionMonitorBase(object):

    """Base interface for all periodic monitors.

    Time is supplied by the caller (in msecs) rather than read from the
    system clock so that the monitors can be driven from a trace as well
    as in real time.
    """

    def __init__(self, interval):
        """Initialize a new condition monitor.

        Args:
            interval (int): the periodicity for the condition monitor, in
                msecs
        """
        if interval <= 0:
            raise ValueError("Monitor interval must be positive (got %r)" %
                             interval)

        self._interval = interval
        self.reset()

    def sample_conditions(self, now):
        """Perform the actual sampling.

        This method should not be overridden by derived classes.
        Instead, they should override :meth:`_sample_conditions_impl`.

        Args:
            now (int): current time in msecs
        """
        self._sample_conditions_impl(now)

        # Record the time the sample was taken so that the next one can
        # be scheduled correctly.
        self._last_sample_time = now

    def _sample_conditions_impl(self, now):
        """Hook function for actual condition monitors.

        raises :exc:NotImplementedError
            This method must be implemented by derived classes.
        """
        raise NotImplementedError("Derived classes must implement this method")

    def get_next_sample_delta(self, now):
        """Compute the amount of time until the next sample.

        If the sampling period has elapsed, this will return 0.
        """
        if self._last_sample_time is None:
            return 0  # first interval happens immediately

        delta_time = self._last_sample_time + self._interval - now
        if delta_time <= 0:
            return 0  # should expire now
        else:
            return delta_time

    def reset(self):
        """Reset any state in the condition monitor.

        This is used any time the monitor is started/restarted.
        """
        self._last_sample_time = None
        self._reset_impl()

    def _reset_impl(self):
        """Hook function for actual condition monitors to reset their state.

        This is a nop in the base class.
        """
        pass

    @property
    def interval(self):
        return self._interval


class BandSteeringMonitor(ConditionMonitorBase):

    """Drive threshold tracking and steering for all local nodes.

    The stations' signal values are expected to have been updated (via
    :meth:`Station.update_signal`) since the previous sample.
    """

    def __init__(self, node_db, config, tracker, scheduler):
        """Initialize a new band steering monitor.

        Args:
            node_db (:class:`NodeDB`): the local nodes and their stations
            config (:class:`SteeringConfig`): the steering tunables; the
                monitor runs every ``tick_interval``
            tracker (:class:`SignalThresholdTracker`): updates the
                per-station thresholds
            scheduler (:class:`SteeringScheduler`): issues the requests
        """
        # The base class resets the monitor, which needs the nodes.
        self._node_db = node_db
        self._config = config
        self._tracker = tracker
        self._scheduler = scheduler

        ConditionMonitorBase.__init__(self, config.tick_interval)

    def _sample_conditions_impl(self, now):
        """Update every station and then run the scheduler on every node."""
        nodes = self._node_db.get_nodes()
        for node in nodes:
            for station in node.get_stations():
                if station.is_connected and station.signal is NO_SIGNAL:
                    # No measurement yet since associating.
                    continue
                self._tracker.update(station, station.signal, node,
                                     self._config)

        for node in nodes:
            if self._scheduler.tick(node, nodes, self._config, now):
                log.debug("Steering pass completed on %s", node.node_id)

    def _reset_impl(self):
        """Restart the steering cadence on every node."""
        for node in self._node_db.get_nodes():
            node.steering_tick_counter = 0


__all__ = ['ConditionMonitorBase', 'BandSteeringMonitor']
