"""
Compliance suite cli
"""
from __future__ import division
from __future__ import print_function
from __future__ import unicode_literals

import importlib
import logging
import unittest

import requests

import ga4gh.cts.cli as cli
import ga4gh.cts.compliance as compliance
import ga4gh.cts.ctsconfig as ctsconfig


class SimplerResult(unittest.TestResult):
    """
    The TestResult class gives formatted tracebacks as error messages, which
    is not what we want. Instead we just want the error message from the
    err param. Hence this subclass.
    """
    def addError(self, test, err):
        self.errors.append((test,
                            "{0}: {1}".format(err[0].__name__, err[1])))

    def addFailure(self, test, err):
        self.failures.append((test,
                              "{0}: {1}".format(err[0].__name__, err[1])))


def _iterTests(suite):
    for test in suite:
        if isinstance(test, unittest.TestSuite):
            for subTest in _iterTests(test):
                yield subTest
        else:
            yield test


def getComplianceTests(categories=None):
    """
    Returns a TestSuite holding the compliance tests, limited to the
    specified categories if any are given.
    """
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()
    for moduleName in compliance.complianceModules:
        module = importlib.import_module(moduleName)
        for test in _iterTests(loader.loadTestsFromModule(module)):
            if not categories or test.category in categories:
                suite.addTest(test)
    return suite


def addCtsOptions(parser):
    parser.add_argument(
        "baseUrl", nargs="?", default=None,
        help="The URL of the server under test; overrides URL_ROOT")
    parser.add_argument(
        "--key", "-k", default=None,
        help="Authentication key sent with every request")
    parser.add_argument(
        "--config", "-c", default='ComplianceConfig', type=str,
        help="The configuration to use")
    parser.add_argument(
        "--config-file", "-f", type=str, default=None,
        help="The configuration file to use")
    parser.add_argument(
        "--category", action="append", choices=compliance.categories,
        help="Only run tests in this category; may be repeated")
    parser.add_argument(
        "--page-size", "-m", default=None, type=int,
        help="The requested page size for paged searches")
    parser.add_argument(
        "--strict", default=False, action="store_true",
        help="Fail on response fields the suite does not know about")
    parser.add_argument(
        "--list", "-l", default=False, action="store_true",
        help="List the selected tests without running them")
    cli.addVerbosityArgument(parser)
    cli.addVersionArgument(parser)
    cli.addDisableUrllibWarningsArgument(parser)


def getCtsParser():
    parser = cli.createArgumentParser("GA4GH API compliance test suite")
    addCtsOptions(parser)
    return parser


def getExtraConfig(parsedArgs):
    """
    Returns the configuration values given on the command line.
    """
    extraConfig = {}
    if parsedArgs.baseUrl is not None:
        extraConfig["URL_ROOT"] = parsedArgs.baseUrl
    if parsedArgs.key is not None:
        extraConfig["AUTHENTICATION_KEY"] = parsedArgs.key
    if parsedArgs.page_size is not None:
        extraConfig["PAGE_SIZE"] = parsedArgs.page_size
    if parsedArgs.strict:
        extraConfig["IGNORE_UNKNOWN_FIELDS"] = False
    return extraConfig


def cts_main(args=None):
    parser = getCtsParser()
    parsedArgs = parser.parse_args(args)
    logging.basicConfig(level=logging.INFO)
    log = logging.getLogger(__name__)
    if parsedArgs.disable_urllib_warnings:
        requests.packages.urllib3.disable_warnings()

    tests = getComplianceTests(parsedArgs.category)
    if parsedArgs.list:
        for test in _iterTests(tests):
            print(test.id())
        return 0

    config = ctsconfig.loadConfig(
        parsedArgs.config, parsedArgs.config_file,
        getExtraConfig(parsedArgs))
    compliance.ComplianceTestCase.configure(
        config, cli.verbosityToLogLevel(parsedArgs.verbose))
    log.info('Running compliance tests against {0}'.format(
        config["URL_ROOT"]))

    results = SimplerResult()
    tests.run(results)

    log.info('{0} Tests run. {1} errors, {2} failures, {3} skipped'.
             format(results.testsRun,
                    len(results.errors),
                    len(results.failures),
                    len(results.skipped)))
    for result in results.errors:
        log.critical('Error: {0}: {1}'.format(result[0].id(), result[1]))
    for result in results.failures:
        log.critical('Failure: {0}: {1}'.format(result[0].id(), result[1]))
    for result in results.skipped:
        log.info('Skipped: {0}: {1}'.format(result[0].id(), result[1]))
    if results.wasSuccessful():
        return 0
    return 1
