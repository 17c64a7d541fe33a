#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2013-2015 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#

"""Band steering algorithm and the components that drive it

The following modules are exported:

    :mod:`threshold`
        adaptive per-station signal threshold

    :mod:`target`
        band ladder and target node eligibility

    :mod:`scheduler`
        periodic issuing of BSS transition requests

    :mod:`policy`
        capacity, roam eligibility, beacon interval and signal floor
        lookups

    :mod:`dispatcher`
        hand-off of the transition requests

    :mod:`condition_monitor`
        periodic driver for the tracker and scheduler

    :mod:`controller_core`
        container for all of the above
"""

__all__ = ['threshold', 'target', 'scheduler', 'policy', 'dispatcher',
           'condition_monitor', 'controller_core', 'config']
