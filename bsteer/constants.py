#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2014-2015 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#
# This file defines constants used accross multiple modules.

from enum import Enum

# Band type constants.
BAND_TYPE = Enum('BAND_TYPE', [('BAND_24G', 0), ('BAND_5G', 1), ('BAND_6G', 2),
                               ('BAND_INVALID', 3)])

# Sentinel for a signal threshold that has not been established yet.
NO_SIGNAL = None

# Frequency ranges (in MHz, inclusive) for each band.
FREQ_RANGE_24G = (2400, 2500)
FREQ_RANGE_5G = (4900, 5924)
FREQ_RANGE_6G = (5925, 7125)

# Length of the window (in msecs) during which a station that was sent a
# transition request is not sent another one.
BSS_TRANSITION_VALIDITY_MSECS = 10000

# Beacon interval (in TUs) assumed when the node does not report one.
DEFAULT_BEACON_INTERVAL = 100

# Noise floor (in dBm) assumed when the node does not report one.
DEFAULT_NOISE_FLOOR = -95


def get_band_for_freq(freq):
    """Classify a raw channel frequency into its band.

    Args:
        freq (int): the center frequency in MHz

    Returns:
        the :obj:`BAND_TYPE` for the frequency, or ``BAND_INVALID`` if it
        falls outside of all supported bands
    """
    if freq is None:
        return BAND_TYPE.BAND_INVALID
    elif FREQ_RANGE_24G[0] <= freq <= FREQ_RANGE_24G[1]:
        return BAND_TYPE.BAND_24G
    elif FREQ_RANGE_5G[0] <= freq <= FREQ_RANGE_5G[1]:
        return BAND_TYPE.BAND_5G
    elif FREQ_RANGE_6G[0] <= freq <= FREQ_RANGE_6G[1]:
        return BAND_TYPE.BAND_6G
    else:
        return BAND_TYPE.BAND_INVALID


# Exports
__all__ = ['BAND_TYPE', 'NO_SIGNAL', 'BSS_TRANSITION_VALIDITY_MSECS',
           'DEFAULT_BEACON_INTERVAL', 'DEFAULT_NOISE_FLOOR',
           'get_band_for_freq']
