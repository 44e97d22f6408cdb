"""
Sets of configuration values for a compliance suite run.
Any of these values may be overridden by a file on the path
given by the environment variable GA4GH_CTS_CONFIGURATION.
"""
from __future__ import division
from __future__ import print_function
from __future__ import unicode_literals

import logging
import os
import posixpath

import flask

import ga4gh.cts.exceptions as exceptions

CONFIGURATION_ENVVAR = "GA4GH_CTS_CONFIGURATION"


class BaseConfig(object):
    """
    Simplest default suite configuration.
    """
    URL_ROOT = "http://localhost:8000/"
    AUTHENTICATION_KEY = None
    PAGE_SIZE = None
    IGNORE_UNKNOWN_FIELDS = True
    VERIFY_SSL = True
    # Maps resource names to paths below URL_ROOT, for servers that
    # mount an endpoint somewhere other than the default.
    ENDPOINTS = {}

    # Names of the well-known objects in the compliance dataset.
    DATASET_NAME = "brca1"
    VARIANT_SET_NAME = "WASH7P"
    RNA_QUANTIFICATION_SET_NAME = "rnaseq"
    VARIANT_ANNOTATION_REFERENCE_NAME = "1"


class ComplianceConfig(BaseConfig):
    """
    Configuration for a reference server started locally on the
    compliance data.
    """
    VERIFY_SSL = False


class StrictComplianceConfig(ComplianceConfig):
    """
    Also fails on response fields the suite does not know about.
    """
    IGNORE_UNKNOWN_FIELDS = False


def loadConfig(baseConfig="ComplianceConfig", configFile=None,
               extraConfig=None):
    """
    Returns a flask.Config built from the named configuration class in
    this module, then the file named by GA4GH_CTS_CONFIGURATION, then the
    specified config file, then the extraConfig values; later sources
    override earlier ones.
    """
    config = flask.Config(os.getcwd())
    configStr = 'ga4gh.cts.ctsconfig:{0}'.format(baseConfig)
    try:
        config.from_object(configStr)
    except ImportError:
        raise exceptions.ConfigurationException(
            "No configuration named '{}'".format(baseConfig))
    if os.environ.get(CONFIGURATION_ENVVAR) is not None:
        config.from_envvar(CONFIGURATION_ENVVAR)
    if configFile is not None:
        config.from_pyfile(configFile)
    if extraConfig is not None:
        config.update(extraConfig)
    logging.getLogger(__name__).debug(
        "Loaded configuration '%s' for %s", baseConfig, config["URL_ROOT"])
    return config


class UrlMapping(object):
    """
    Maps GA4GH resource names onto URLs on the server under test.
    """
    defaultEndpoints = {
        "datasets": "datasets",
        "variantsets": "variantsets",
        "variantannotationsets": "variantannotationsets",
        "variantannotations": "variantannotations",
        "rnaquantificationsets": "rnaquantificationsets",
        "rnaquantifications": "rnaquantifications",
        "expressionlevels": "expressionlevels",
    }

    def __init__(self, urlRoot, endpoints=None):
        self._urlRoot = urlRoot
        self._endpoints = dict(self.defaultEndpoints)
        if endpoints is not None:
            self._endpoints.update(endpoints)

    @classmethod
    def fromConfig(cls, config):
        """
        Returns the UrlMapping described by the URL_ROOT and ENDPOINTS
        values of the specified config.
        """
        return cls(config["URL_ROOT"], config.get("ENDPOINTS"))

    def getUrlRoot(self):
        return self._urlRoot

    def getEndpoint(self, objectName):
        """
        Returns the path below the URL root serving the specified resource.
        """
        if objectName not in self._endpoints:
            raise exceptions.ConfigurationException(
                "No endpoint configured for '{}'".format(objectName))
        return self._endpoints[objectName].strip("/")

    def getSearchUrl(self, objectName):
        return posixpath.join(
            self._urlRoot, self.getEndpoint(objectName), "search")

    def getGetUrl(self, objectName, id_):
        return posixpath.join(
            self._urlRoot, self.getEndpoint(objectName), id_)
