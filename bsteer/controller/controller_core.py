#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2013-2015 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#

import logging

from bsteer.controller.condition_monitor import BandSteeringMonitor
from bsteer.controller.dispatcher import LoggingDispatcher
from bsteer.controller.policy import DefaultSteeringPolicy
from bsteer.controller.scheduler import SteeringScheduler
from bsteer.controller.target import will_steer
from bsteer.controller.threshold import SignalThresholdTracker

"""Core representation of the controller.

This module exports the following:

    :class:`Controller`
        entity that serves as a container for the underlying controller
        objects
"""

log = logging.getLogger('bsteercontroller')
"""The logger used for controller class, named ``bsteercontroller``."""


class Controller(object):

    """Class that manages all of the controller components.

    This contains the policy, the threshold tracker, the scheduler and
    the monitors that drive them.
    """

    def __init__(self, node_db, config, dispatcher=None, policy=None):
        """Initialize a new controller.

        Args:
            node_db (:class:`NodeDB`): the local nodes and their stations
            config (:class:`SteeringConfig`): the steering tunables
            dispatcher (:class:`TransitionDispatcherIface`): where to send
                the transition requests (a :class:`LoggingDispatcher` if
                not provided)
            policy (:class:`SteeringPolicyIface`): the policy lookups (a
                :class:`DefaultSteeringPolicy` if not provided)
        """
        self._node_db = node_db
        self._config = config
        self._dispatcher = dispatcher or LoggingDispatcher()
        self._policy = policy or DefaultSteeringPolicy(config)

        self._tracker = SignalThresholdTracker(self._policy)
        self._scheduler = SteeringScheduler(self._policy, self._dispatcher)

        self._monitors = [BandSteeringMonitor(node_db, config, self._tracker,
                                              self._scheduler)]

        if not config.steering_interval:
            log.info("Band steering is disabled")

    def add_condition_monitor(self, monitor):
        """Add the provided monitor to those that execute periodically."""
        self._monitors.append(monitor)

    def poll(self, now):
        """Run every monitor whose interval has elapsed.

        Args:
            now (int): current time in msecs

        Returns:
            the time (in msecs) until the next monitor is due
        """
        for monitor in self._monitors:
            if monitor.get_next_sample_delta(now) == 0:
                monitor.sample_conditions(now)

        return min(monitor.get_next_sample_delta(now)
                   for monitor in self._monitors)

    def reset(self):
        """Restart all monitors (eg. after the node set changed)."""
        for monitor in self._monitors:
            monitor.reset()

    def will_steer(self, current_node, candidate_node):
        """Determine whether band steering would request this roam."""
        return will_steer(current_node, candidate_node, self._config,
                          self._policy.node_below_max_assoc)

    @property
    def node_db(self):
        return self._node_db

    @property
    def config(self):
        return self._config

    @property
    def dispatcher(self):
        return self._dispatcher

    @property
    def policy(self):
        return self._policy

    @property
    def scheduler(self):
        return self._scheduler

    @property
    def tracker(self):
        return self._tracker


# Exports
__all__ = ['Controller']
