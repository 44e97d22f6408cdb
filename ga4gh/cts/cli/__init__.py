"""
Functionality common to cli modules
"""
from __future__ import division
from __future__ import print_function
from __future__ import unicode_literals

import argparse
import logging
import operator

import ga4gh.cts
import ga4gh.cts.protocol as protocol


class SortedHelpFormatter(argparse.HelpFormatter):
    """
    An argparse HelpFormatter that sorts the flags in alphabetical order
    """
    def add_arguments(self, actions):
        actions = sorted(
            actions, key=operator.attrgetter('option_strings'))
        super(SortedHelpFormatter, self).add_arguments(actions)


def createArgumentParser(description):
    parser = argparse.ArgumentParser(
        description=description,
        formatter_class=SortedHelpFormatter)
    return parser


def verbosityToLogLevel(verbosity):
    """
    Returns the specfied verbosity level interpreted as a logging level.
    """
    ret = 0
    if verbosity == 1:
        ret = logging.INFO
    elif verbosity >= 2:
        ret = logging.DEBUG
    return ret


def addVersionArgument(parser):
    versionString = (
        "GA4GH Compliance Test Suite Version {} "
        "(Protocol Version {})".format(
            ga4gh.cts.__version__, protocol.version))
    parser.add_argument(
        "--version", version=versionString, action="version")


def addDisableUrllibWarningsArgument(parser):
    parser.add_argument(
        "--disable-urllib-warnings", default=False, action="store_true",
        help="Disable urllib3 warnings")


def addVerbosityArgument(parser):
    parser.add_argument(
        "--verbose", "-v", action='count', default=0,
        help="Increase verbosity; can be supplied multiple times")
