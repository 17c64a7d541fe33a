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

"""Delivery of BSS Transition Management requests.

The scheduler hands each request to a dispatcher and does not wait for
or track the outcome. The transport that actually delivers the 802.11v
frame lives outside of this package.
"""

log = logging.getLogger('bsteerdispatch')
"""The logger used for dispatched requests, named ``bsteerdispatch``."""


class TransitionRequest(object):

    """A single BSS transition request for a station.

    Instances are only records of what was asked for; the request
    itself has already been handed off when one is created.
    """

    def __init__(self, station, disassoc_imminent, disassoc_timer,
                 bss_transition_required, validity_period):
        """Record the request.

        :param :class:`Station` station: The station being asked to move.
        :param bool disassoc_imminent: Whether the station will be
            disassociated if it does not move.
        :param int disassoc_timer: Number of beacons until the
            disassociation (0 if none is scheduled).
        :param bool bss_transition_required: Whether the station is
            expected to transition (as opposed to a mere suggestion).
        :param int validity_period: Number of beacons for which the
            request is valid.
        """
        self._station = station
        self._disassoc_imminent = disassoc_imminent
        self._disassoc_timer = disassoc_timer
        self._bss_transition_required = bss_transition_required
        self._validity_period = validity_period

    @property
    def station(self):
        return self._station

    @property
    def disassoc_imminent(self):
        return self._disassoc_imminent

    @property
    def disassoc_timer(self):
        return self._disassoc_timer

    @property
    def bss_transition_required(self):
        return self._bss_transition_required

    @property
    def validity_period(self):
        return self._validity_period

    def __eq__(self, rhs):
        """Compare two requests for equality."""
        return self._station is rhs._station and \
            self._disassoc_imminent == rhs._disassoc_imminent and \
            self._disassoc_timer == rhs._disassoc_timer and \
            self._bss_transition_required == rhs._bss_transition_required and \
            self._validity_period == rhs._validity_period

    def __str__(self):
        """Returns a summary of the request."""
        return "BTM request to %s (node %s): disassoc_imminent=%s " \
            "disassoc_timer=%d bss_transition_required=%s " \
            "validity_period=%d" % (
                self._station.mac_addr,
                self._station.node.node_id if self._station.node else '-',
                self._disassoc_imminent, self._disassoc_timer,
                self._bss_transition_required, self._validity_period)


class TransitionDispatcherIface(object):

    """Interface class for delivering transition requests.

    .. note::

        The dispatch function is called within the tick context of the
        node. It should not block or perform other long running
        operations.
    """

    def __init__(self):
        """Initialize a new dispatcher object."""
        pass

    def dispatch_transition_request(self, station, disassoc_imminent,
                                    disassoc_timer, bss_transition_required,
                                    validity_period):
        """Send a BSS transition request to the station.

        See :class:`TransitionRequest` for the meaning of the parameters.

        raises :exc:NotImplementedError
            This method must be implemented by derived classes.
        """
        raise NotImplementedError("Derived classes must implement this method")


class LoggingDispatcher(TransitionDispatcherIface):

    """Dispatcher that only logs and records the requests.

    This is used when no transport is available (eg. for dry runs and
    trace playback).
    """

    def __init__(self):
        """Initialize with no requests recorded."""
        TransitionDispatcherIface.__init__(self)

        self._requests = []

    def dispatch_transition_request(self, station, disassoc_imminent,
                                    disassoc_timer, bss_transition_required,
                                    validity_period):
        """Record the request and log it."""
        request = TransitionRequest(station, disassoc_imminent,
                                    disassoc_timer, bss_transition_required,
                                    validity_period)
        log.info("%s", request)
        self._requests.append(request)

    def clear(self):
        self._requests = []

    @property
    def requests(self):
        return list(self._requests)


__all__ = ['TransitionRequest', 'TransitionDispatcherIface',
           'LoggingDispatcher']
