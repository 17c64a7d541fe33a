#!/usr/bin/env python
#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2014-2015 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#

import logging

import bsteer
from bsteer.controller.dispatcher import LoggingDispatcher


class PrintingDispatcher(LoggingDispatcher):

    """Dispatcher that also writes each request to the output."""

    def __init__(self, output_fh, clock):
        LoggingDispatcher.__init__(self)
        self._output_fh = output_fh
        self._clock = clock

    def dispatch_transition_request(self, station, *args):
        LoggingDispatcher.dispatch_transition_request(self, station, *args)
        print("%d\t%s" % (self._clock[0], self.requests[-1]),
              file=self._output_fh)


def apply_events(node_db, event, now):
    """Apply the association, signal, noise and roam events of a trace step.

    Args:
        node_db (:class:`NodeDB`): the model to update
        event (dict): one entry of the ``trace`` section
        now (int): the time of the event in msecs
    """
    for mac_addr in event.get('associate', []):
        station = node_db.get_station(mac_addr)
        if station is None:
            raise ValueError("Unknown station %s in trace" % mac_addr)
        station.associate(now)

    for mac_addr in event.get('disassociate', []):
        station = node_db.get_station(mac_addr)
        if station is None:
            raise ValueError("Unknown station %s in trace" % mac_addr)
        station.disassociate()

    for mac_addr, node_id in event.get('roam', {}).items():
        node_db.move_station(mac_addr, node_id, now)

    for node_id, noise in event.get('noise', {}).items():
        node = node_db.get_node(node_id)
        if node is None:
            raise ValueError("Unknown node '%s' in trace" % node_id)
        node.update_noise(noise)

    for mac_addr, signal in event.get('signal', {}).items():
        station = node_db.get_station(mac_addr)
        if station is None:
            raise ValueError("Unknown station %s in trace" % mac_addr)
        station.update_signal(signal)


def run_trace(config_data, output_fh, duration=None):
    """Replay the trace in the config against the steering engine.

    Args:
        config_data (dict): the parsed config, including a ``trace``
            section (a list of events, each with a ``time`` in msecs)
        output_fh (:object:`file`): the file handle to use for output
        duration (int): how long to run for (in msecs); defaults to the
            time of the last event

    Returns:
        the number of transition requests issued
    """
    clock = [0]
    dispatcher = PrintingDispatcher(output_fh, clock)
    node_db, controller = bsteer.assemble_system(config_data, dispatcher)

    events = sorted(config_data.get('trace') or [], key=lambda e: e['time'])
    if duration is None:
        duration = events[-1]['time'] if events else 0

    tick_interval = controller.config.tick_interval
    while clock[0] <= duration:
        while events and events[0]['time'] <= clock[0]:
            apply_events(node_db, events.pop(0), clock[0])

        controller.poll(clock[0])
        clock[0] += tick_interval

    logging.info("Issued %d requests", len(dispatcher.requests))
    return len(dispatcher.requests)


if __name__ == '__main__':
    import argparse
    import sys

    parser = argparse.ArgumentParser(description="Replay a trace of " +
                                                 "station events through " +
                                                 "the band steering engine")

    parser.add_argument('-c', '--config', help='Config and trace file',
                        required=True)
    parser.add_argument('-o', '--output',
                        help='Output filename (stdout if not specified)',
                        required=False)
    parser.add_argument('-d', '--duration', type=int, default=None,
                        help='Time to run for, in msecs (defaults to the ' +
                             'time of the last event)')

    log_group = parser.add_argument_group('Logging options')
    log_group.add_argument('-v', '--verbose', action='store_true',
                           default=False,
                           help='Enable debug level logging')
    log_group.add_argument('-l', '--logfile', default=None,
                           help='Specify filename to use for debug logging')

    args = parser.parse_args()

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG

    format = '%(asctime)-15s %(levelname)-8s %(name)-15s %(message)s'
    logging.basicConfig(filename=args.logfile, level=level,
                        format=format)

    config_data = bsteer.read_config_file(args.config)
    if args.output is None:
        run_trace(config_data, sys.stdout, args.duration)
    else:
        with open(args.output, "w") as output_fh:
            run_trace(config_data, output_fh, args.duration)
