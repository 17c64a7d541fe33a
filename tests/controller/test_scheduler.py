#!/usr/bin/env python
#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2013-2016 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#

import unittest

from mock import MagicMock, call

from bsteer.model.config import create_steering_config
from bsteer.model.model_core import Station, Node
from bsteer.controller.dispatcher import TransitionDispatcherIface
from bsteer.controller.policy import SteeringPolicyIface
from bsteer.controller.scheduler import SteeringScheduler, get_min_tick_count


class TestSteeringScheduler(unittest.TestCase):

    def setUp(self):
        self.node_24g = Node('wlan0', 'home', 2412)
        self.node_5g = Node('wlan1', 'home', 5180)
        self.node_6g = Node('wlan2', 'home', 5955)
        self.nodes = [self.node_24g, self.node_5g, self.node_6g]

        # Fires on every tick.
        self.config = create_steering_config(steering_interval=1000,
                                             tick_interval=1000,
                                             kick_delay=5000)

        self.policy = self._create_mock_policy()
        self.dispatcher = self._create_mock_dispatcher()
        self.scheduler = SteeringScheduler(self.policy, self.dispatcher)

    def _create_mock_policy(self, beacon_interval=100):
        """Create a policy where every node has room and every STA may roam."""
        policy = SteeringPolicyIface()
        policy.node_below_max_assoc = MagicMock(name='node_below_max_assoc',
                                                return_value=True)
        policy.can_perform_roam = MagicMock(name='can_perform_roam',
                                            return_value=True)
        policy.get_beacon_interval = MagicMock(name='get_beacon_interval',
                                               return_value=beacon_interval)
        return policy

    def _create_mock_dispatcher(self):
        dispatcher = TransitionDispatcherIface()
        dispatcher.dispatch_transition_request = MagicMock(
            name='dispatch_transition_request')
        return dispatcher

    def _add_station(self, mac_addr, node=None, bss_transition_capable=True,
                     aggressiveness=0, below_snr=True):
        """Add a connected station that has been flagged as actionable."""
        station = Station(mac_addr,
                          bss_transition_capable=bss_transition_capable,
                          aggressiveness=aggressiveness)
        (node or self.node_24g).add_station(station)
        station.associate(0)
        station.band_steering.threshold = -60
        station.band_steering.below_snr = below_snr
        return station

    def _tick(self, now, node=None, config=None):
        return self.scheduler.tick(node or self.node_24g, self.nodes,
                                   config or self.config, now)

    def test_min_tick_count(self):
        """Verify the number of ticks per firing is rounded up."""
        self.assertEqual(3, get_min_tick_count(
            create_steering_config(steering_interval=60, tick_interval=20)))
        self.assertEqual(3, get_min_tick_count(
            create_steering_config(steering_interval=50, tick_interval=20)))
        self.assertEqual(1, get_min_tick_count(
            create_steering_config(steering_interval=10, tick_interval=20)))
        self.assertEqual(120, get_min_tick_count(
            create_steering_config(steering_interval=120000,
                                   tick_interval=1000)))

    def test_cadence(self):
        """Verify the node fires once every min_count ticks."""
        config = create_steering_config(steering_interval=60, tick_interval=20)
        fired = [tick for tick in range(1, 13)
                 if self._tick(tick * 20, config=config)]
        self.assertEqual([3, 6, 9, 12], fired)

        # Counter is reset on firing.
        self.assertEqual(0, self.node_24g.steering_tick_counter)
        self._tick(13 * 20, config=config)
        self.assertEqual(1, self.node_24g.steering_tick_counter)

    def test_cadence_stations(self):
        """Verify stations are only considered on firing ticks."""
        config = create_steering_config(steering_interval=60, tick_interval=20)
        station = self._add_station('00:00:00:00:00:01')

        self.assertFalse(self._tick(20, config=config))
        self.assertFalse(self._tick(40, config=config))
        self.assertFalse(self.policy.can_perform_roam.called)
        self.assertFalse(self.dispatcher.dispatch_transition_request.called)
        self.assertTrue(station.band_steering.below_snr)

        self.assertTrue(self._tick(60, config=config))
        self.dispatcher.dispatch_transition_request.assert_called_once_with(
            station, False, 0, True, 100)
        self.assertFalse(station.band_steering.below_snr)

    def test_disabled(self):
        """Verify nothing happens when band steering is disabled."""
        config = create_steering_config(steering_interval=0)
        station = self._add_station('00:00:00:00:00:01')

        for now in range(0, 10000, 1000):
            self.assertFalse(self._tick(now, config=config))

        self.assertEqual(0, self.node_24g.steering_tick_counter)
        self.assertTrue(station.band_steering.below_snr)
        self.assertFalse(self.dispatcher.dispatch_transition_request.called)

    def test_6g_node(self):
        """Verify stations on 6 GHz are never steered."""
        station = self._add_station('00:00:00:00:00:01', node=self.node_6g)

        self.assertFalse(self._tick(1000, node=self.node_6g))
        self.assertEqual(0, self.node_6g.steering_tick_counter)
        self.assertTrue(station.band_steering.below_snr)
        self.assertFalse(self.dispatcher.dispatch_transition_request.called)

    def test_no_target(self):
        """Verify nothing happens when there is no node to steer to."""
        station = self._add_station('00:00:00:00:00:01')

        self.policy.node_below_max_assoc.return_value = False
        self.assertFalse(self._tick(1000))
        self.assertEqual(0, self.node_24g.steering_tick_counter)

        # Only the 5 GHz node is a target, and it is not a local node.
        self.policy.node_below_max_assoc.return_value = True
        self.assertFalse(self.scheduler.tick(
            self.node_24g, [self.node_24g, self.node_6g], self.config, 1000))

        self.assertTrue(station.band_steering.below_snr)
        self.assertFalse(self.dispatcher.dispatch_transition_request.called)

        # 5 GHz steers to 6 GHz.
        station = self._add_station('00:00:00:00:00:02', node=self.node_5g)
        self.assertTrue(self._tick(1000, node=self.node_5g))
        self.dispatcher.dispatch_transition_request.assert_called_once_with(
            station, False, 0, True, 100)

    def test_advisory(self):
        """Verify the request for stations with a low aggressiveness."""
        for aggressiveness in (0, 1):
            self.dispatcher.dispatch_transition_request.reset_mock()
            station = self._add_station('00:00:00:00:00:0%d' % aggressiveness,
                                        aggressiveness=aggressiveness)

            self.assertTrue(self._tick(1000))
            self.dispatcher.dispatch_transition_request.assert_called_once_with(
                station, False, 0, True, 100)
            self.assertIsNone(station.kick_time)
            self.assertEqual(11000, station.roam_request_validity_end)
            self.assertFalse(station.band_steering.below_snr)

    def test_aggressiveness_2(self):
        """Verify a kick is armed but no countdown is sent."""
        station = self._add_station('00:00:00:00:00:01', aggressiveness=2)

        self._tick(1000)
        self.assertEqual(6000, station.kick_time)
        self.dispatcher.dispatch_transition_request.assert_called_once_with(
            station, True, 0, True, 100)

    def test_aggressiveness_3(self):
        """Verify the disassociation countdown."""
        station = self._add_station('00:00:00:00:00:01', aggressiveness=3)

        self._tick(1000)
        self.assertEqual(6000, station.kick_time)
        self.assertEqual(11000, station.roam_request_validity_end)
        self.dispatcher.dispatch_transition_request.assert_called_once_with(
            station, True, 50, True, 100)
        self.assertFalse(station.band_steering.below_snr)

        # Higher levels behave the same.
        station = self._add_station('00:00:00:00:00:02', aggressiveness=5)
        self.dispatcher.dispatch_transition_request.reset_mock()
        self._tick(2000)
        self.assertEqual(7000, station.kick_time)
        self.dispatcher.dispatch_transition_request.assert_called_once_with(
            station, True, 50, True, 100)

    def test_kick_sticky(self):
        """Verify an already armed kick is not rearmed."""
        station = self._add_station('00:00:00:00:00:01', aggressiveness=3)
        station.arm_kick(3000)

        self._tick(1000)
        self.assertEqual(3000, station.kick_time)
        self.dispatcher.dispatch_transition_request.assert_called_once_with(
            station, True, 20, True, 100)

        # Kick time already passed
        station = self._add_station('00:00:00:00:00:02', aggressiveness=3)
        station.arm_kick(500)
        self.dispatcher.dispatch_transition_request.reset_mock()
        self._tick(11000)
        self.assertEqual(500, station.kick_time)
        self.dispatcher.dispatch_transition_request.assert_called_once_with(
            station, True, 0, True, 100)

    def test_beacon_interval(self):
        """Verify timers are expressed in beacons, truncated."""
        self.policy.get_beacon_interval.return_value = 300
        station = self._add_station('00:00:00:00:00:01', aggressiveness=3)

        self._tick(1000)
        self.policy.get_beacon_interval.assert_called_with(self.node_24g)
        # 10000 / 300 and 5000 / 300
        self.dispatcher.dispatch_transition_request.assert_called_once_with(
            station, True, 16, True, 33)

    def test_not_below_snr(self):
        """Verify stations outside the actionable zone are skipped."""
        station = self._add_station('00:00:00:00:00:01', below_snr=False)

        self.assertTrue(self._tick(1000))
        self.assertFalse(self.dispatcher.dispatch_transition_request.called)
        self.assertFalse(station.band_steering.below_snr)
        self.assertEqual(0, station.roam_request_validity_end)

    def test_validity_period(self):
        """Verify requests are debounced until the validity period ends."""
        station = self._add_station('00:00:00:00:00:01')

        self._tick(1000)
        self.assertEqual(1, self.dispatcher.dispatch_transition_request.call_count)
        self.assertEqual(11000, station.roam_request_validity_end)

        # Still within the validity period; the flag is consumed anyway.
        station.band_steering.below_snr = True
        self._tick(10999)
        self.assertEqual(1, self.dispatcher.dispatch_transition_request.call_count)
        self.assertFalse(station.band_steering.below_snr)
        self.assertEqual(11000, station.roam_request_validity_end)

        # Not raised again, so nothing is sent even though the window ended.
        self._tick(11000)
        self.assertEqual(1, self.dispatcher.dispatch_transition_request.call_count)

        station.band_steering.below_snr = True
        self._tick(11000)
        self.assertEqual(2, self.dispatcher.dispatch_transition_request.call_count)
        self.assertEqual(21000, station.roam_request_validity_end)

    def test_not_bss_transition_capable(self):
        """Verify stations without 802.11v support are never sent requests."""
        station = self._add_station('00:00:00:00:00:01',
                                    bss_transition_capable=False,
                                    aggressiveness=3)

        self.assertTrue(self._tick(1000))
        self.assertFalse(self.dispatcher.dispatch_transition_request.called)
        self.assertFalse(station.band_steering.below_snr)
        self.assertEqual(0, station.roam_request_validity_end)
        self.assertIsNone(station.kick_time)

    def test_roam_not_allowed(self):
        """Verify stations the roam policy rejects are left untouched."""
        station = self._add_station('00:00:00:00:00:01')
        self.policy.can_perform_roam.return_value = False

        self.assertTrue(self._tick(1000))
        self.policy.can_perform_roam.assert_called_once_with(station, 1000)
        self.assertFalse(self.dispatcher.dispatch_transition_request.called)
        self.assertTrue(station.band_steering.below_snr)
        self.assertEqual(0, station.roam_request_validity_end)

    def test_multiple_stations(self):
        """Verify every qualifying station gets one request, in order."""
        sta1 = self._add_station('00:00:00:00:00:01')
        sta2 = self._add_station('00:00:00:00:00:02', below_snr=False)
        sta3 = self._add_station('00:00:00:00:00:03', aggressiveness=3)
        sta4 = self._add_station('00:00:00:00:00:04',
                                 bss_transition_capable=False)
        sta5 = self._add_station('00:00:00:00:00:05', aggressiveness=2)

        self._tick(1000)
        self.assertEqual(
            [call(sta1, False, 0, True, 100),
             call(sta3, True, 50, True, 100),
             call(sta5, True, 0, True, 100)],
            self.dispatcher.dispatch_transition_request.call_args_list)

        # The flag is consumed on every station the pass reached.
        for station in (sta1, sta2, sta3, sta4, sta5):
            self.assertFalse(station.band_steering.below_snr)

    def test_dispatch_failure(self):
        """Verify the flag is consumed even if the dispatch fails."""
        station = self._add_station('00:00:00:00:00:01')
        self.dispatcher.dispatch_transition_request.side_effect = \
            RuntimeError('transport down')

        self.assertRaises(RuntimeError, self._tick, 1000)
        self.assertFalse(station.band_steering.below_snr)


if __name__ == '__main__':
    unittest.main()
