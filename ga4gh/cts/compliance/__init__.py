"""
Compliance tests run against a live GA4GH server.

Tests are standard python unittest tests. As they need to know which server
to talk to, the usual unittest pattern is broken in the same way as for the
server's configtest: the runner injects the configuration through class
attributes of ComplianceTestCase before the tests are run.
"""
from __future__ import division
from __future__ import print_function
from __future__ import unicode_literals

import logging
import unittest

import ga4gh.cts.client as client
import ga4gh.cts.ctsconfig as ctsconfig

RNA_QUANTIFICATIONS = "rnaQuantifications"
VARIANT_ANNOTATIONS = "variantAnnotations"

categories = [RNA_QUANTIFICATIONS, VARIANT_ANNOTATIONS]

complianceModules = [
    "ga4gh.cts.compliance.rna_quantifications",
    "ga4gh.cts.compliance.variant_annotations",
]


class ComplianceTestCase(unittest.TestCase):
    """
    Superclass of all compliance tests. A single client is shared by every
    test in the process.
    """
    category = None

    config = None
    logLevel = logging.WARNING
    _client = None

    @classmethod
    def configure(cls, config, logLevel=logging.WARNING, clientInstance=None):
        """
        Sets the configuration used by all compliance tests, dropping any
        client built for an earlier configuration. If clientInstance is
        given it is used instead of an HttpClient built from config.
        """
        ComplianceTestCase.config = config
        ComplianceTestCase.logLevel = logLevel
        ComplianceTestCase._client = clientInstance

    @classmethod
    def getClient(cls):
        if ComplianceTestCase.config is None:
            ComplianceTestCase.config = ctsconfig.loadConfig()
        if ComplianceTestCase._client is None:
            ComplianceTestCase._client = client.HttpClient.fromConfig(
                ComplianceTestCase.config, ComplianceTestCase.logLevel)
        return ComplianceTestCase._client

    @classmethod
    def setUpClass(cls):
        cls.client = cls.getClient()
        cls.log = logging.getLogger(cls.__module__)
