#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2013-2015 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#

"""Model infrastructure for band steering

The following modules are exported:

    :mod:`model_core`
        core infrastructure for the node and station state

    :mod:`config`
        construction of the model and tunables from config data
"""

__all__ = ['model_core', 'config']
