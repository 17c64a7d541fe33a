#
# @@-COPYRIGHT-START-@@
#
# Copyright (c) 2014-2015 Qualcomm Atheros, Inc.
# All rights reserved.
# Qualcomm Atheros Confidential and Proprietary.
#
# @@-COPYRIGHT-END-@@
#

"""Band steering decision engine for a Wi-Fi client steering controller

The following packages are exported:

    :mod:`bsteer.model`
        modules for maintaining the current state of the local nodes
        and their stations

    :mod:`bsteer.controller`
        modules for the band steering algorithm and its periodic driver
"""

import yaml
import logging

import bsteer.model.config
import bsteer.controller.config

LOG_LEVEL_DUMP = logging.DEBUG // 2


def read_config_file(config_file):
    """Read the data from the config file into a dictionary.

    Returns the dictionary representation of the config file. This is
    suitable to pass to the other functions in the model and controller
    packages.
    """
    with open(config_file) as infile:
        return yaml.safe_load(infile)


def assemble_system(config_data, dispatcher=None, policy=None):
    """Construct the model and controller based on the config.

    :param dict config_data: the parsed configuration file
    :param :class:`TransitionDispatcherIface` dispatcher: where to send
        the transition requests (requests are only logged if None)
    :param :class:`SteeringPolicyIface` policy: the policy lookups to use
        (the default policy if None)

    Returns a tuple of the :class:`NodeDB` and the :class:`Controller`.
    """
    # Create the model first.
    node_db = bsteer.model.config.create_node_db_from_config_data(
        config_data['model'])

    controller = bsteer.controller.config.create_controller_from_config_data(
        config_data.get('steering'), node_db, dispatcher, policy)

    return (node_db, controller)


__all__ = ['model', 'controller', 'LOG_LEVEL_DUMP',
           'read_config_file', 'assemble_system']
