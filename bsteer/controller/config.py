#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2013-2016 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#

"""Create the controller from the config data.

The ``steering`` section of the configuration file holds the band
steering tunables (see :class:`SteeringConfig`). Everything it omits
takes its default value.
"""

from bsteer.controller.controller_core import Controller
from bsteer.model.config import create_steering_config_from_config_data


def create_controller_from_config_data(config_data, node_db, dispatcher=None,
                                       policy=None):
    """Construct a controller object based on config data.

    :param dict config_data: the steering section of the config (or None)
    :param :class:`NodeDB` node_db: the fully populated model
    :param :class:`TransitionDispatcherIface` dispatcher: where to send
        the transition requests
    :param :class:`SteeringPolicyIface` policy: the policy lookups
    """
    config = create_steering_config_from_config_data(config_data)
    return Controller(node_db, config, dispatcher, policy)
