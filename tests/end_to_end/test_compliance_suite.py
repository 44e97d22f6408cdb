"""
Runs the compliance suite against conforming and broken test servers
"""
from __future__ import division
from __future__ import print_function
from __future__ import unicode_literals

import os
import unittest

import mock

import ga4gh.cts.cli.cts as cli_cts
import ga4gh.cts.compliance as compliance
import ga4gh.cts.ctsconfig as ctsconfig
import ga4gh.cts.protocol as protocol

import tests.datarepo as datarepo
import tests.server as server


class GetMismatchRepository(datarepo.ComplianceDataRepository):
    """
    GET /rnaquantifications/{id} disagrees with the search results.
    """
    def getRnaQuantification(self, id_):
        rnaQuantification = super(
            GetMismatchRepository, self).getRnaQuantification(id_)
        if rnaQuantification is None:
            return None
        changed = protocol.RnaQuantification()
        changed.CopyFrom(rnaQuantification)
        changed.name = "somethingElse"
        return changed


class GetNotFoundRepository(datarepo.ComplianceDataRepository):
    """
    RNA quantifications are searchable but cannot be fetched by ID.
    """
    def getRnaQuantification(self, id_):
        return None


class FeatureFilterIgnoredRepository(datarepo.ComplianceDataRepository):
    def getVariantAnnotations(
            self, variantAnnotationSetId, referenceName, start, end,
            featureIds=()):
        return super(
            FeatureFilterIgnoredRepository, self).getVariantAnnotations(
                variantAnnotationSetId, referenceName, start, end)


class MissingImpactRepository(datarepo.ComplianceDataRepository):
    def getVariantAnnotations(self, *args, **kwargs):
        ret = []
        for annotation in super(
                MissingImpactRepository, self).getVariantAnnotations(
                    *args, **kwargs):
            stripped = protocol.VariantAnnotation()
            stripped.CopyFrom(annotation)
            for transcriptEffect in stripped.transcript_effects:
                transcriptEffect.ClearField("attributes")
            ret.append(stripped)
        return ret


class ComplianceSuiteTest(unittest.TestCase):
    """
    Runs the compliance tests in process, with the client talking to a
    flask test client.
    """
    def tearDown(self):
        compliance.ComplianceTestCase.configure(None)

    def getConfig(self, **extraConfig):
        with mock.patch.dict(os.environ, clear=True):
            return ctsconfig.loadConfig(extraConfig=extraConfig)

    def runSuite(self, repository, categories=None, config=None):
        if config is None:
            config = self.getConfig()
        httpClient = server.DummyHttpClient(
            server.createApp(repository),
            ignore_unknown_fields=config["IGNORE_UNKNOWN_FIELDS"])
        httpClient.set_page_size(config["PAGE_SIZE"])
        compliance.ComplianceTestCase.configure(
            config, clientInstance=httpClient)
        results = cli_cts.SimplerResult()
        cli_cts.getComplianceTests(categories).run(results)
        return results

    def getNames(self, testResults):
        return sorted(test.id().split(".")[-1] for test, _ in testResults)

    def testConformingServer(self):
        results = self.runSuite(datarepo.ComplianceDataRepository())
        self.assertEqual(results.testsRun, 4)
        self.assertEqual(results.errors, [])
        self.assertEqual(results.failures, [])
        self.assertTrue(results.wasSuccessful())

    def testConformingServerSmallPages(self):
        results = self.runSuite(
            datarepo.ComplianceDataRepository(),
            config=self.getConfig(PAGE_SIZE=1, IGNORE_UNKNOWN_FIELDS=False))
        self.assertTrue(results.wasSuccessful())

    def testGetMismatch(self):
        results = self.runSuite(GetMismatchRepository())
        self.assertEqual(results.errors, [])
        self.assertEqual(
            self.getNames(results.failures),
            ["testRnaQuantificationGetResultsMatchSearchResults"])
        self.assertTrue(results.failures[0][1].startswith("AssertionError"))

    def testGetNotFound(self):
        results = self.runSuite(
            GetNotFoundRepository(), [compliance.RNA_QUANTIFICATIONS])
        self.assertEqual(results.testsRun, 1)
        self.assertEqual(results.failures, [])
        self.assertEqual(
            self.getNames(results.errors),
            ["testRnaQuantificationGetResultsMatchSearchResults"])
        self.assertIn("status_code 404", results.errors[0][1])

    def testTooManyRnaQuantifications(self):
        results = self.runSuite(
            datarepo.ComplianceDataRepository(numRnaQuantifications=2))
        self.assertEqual(
            self.getNames(results.failures),
            ["testRnaQuantificationGetResultsMatchSearchResults"])

    def testFeatureFilterIgnored(self):
        results = self.runSuite(FeatureFilterIgnoredRepository())
        self.assertEqual(results.errors, [])
        self.assertEqual(
            self.getNames(results.failures),
            ["testSearchingVariantAnnotationsByFeature"])

    def testMissingImpact(self):
        results = self.runSuite(MissingImpactRepository())
        self.assertEqual(results.errors, [])
        self.assertEqual(
            self.getNames(results.failures), ["testTranscriptEffects"])

    def testWrongNumberOfAnnotations(self):
        results = self.runSuite(
            datarepo.ComplianceDataRepository(numRegionAnnotations=9),
            [compliance.VARIANT_ANNOTATIONS])
        self.assertEqual(results.testsRun, 3)
        self.assertEqual(
            self.getNames(results.failures),
            ["testSearchingVariantAnnotations",
             "testSearchingVariantAnnotationsByFeature"])

    def testMissingDataset(self):
        results = self.runSuite(
            datarepo.ComplianceDataRepository(),
            config=self.getConfig(DATASET_NAME="notThere"))
        self.assertEqual(results.testsRun, 4)
        self.assertEqual(len(results.failures), 4)

    def testFixtureIdsLogged(self):
        repository = datarepo.ComplianceDataRepository()
        rnaQuantificationSet = repository.getRnaQuantificationSets(
            repository.getDatasets()[0].id)[0]
        with self.assertLogs(
                "ga4gh.cts.compliance.rna_quantifications", "DEBUG") as logs:
            results = self.runSuite(
                repository, [compliance.RNA_QUANTIFICATIONS])
        self.assertTrue(results.wasSuccessful())
        self.assertEqual(
            logs.output, [
                "DEBUG:ga4gh.cts.compliance.rna_quantifications:"
                "RNA quantification set {} has 1 quantifications".format(
                    rnaQuantificationSet.id)])

    def testSearchedSetLogged(self):
        with self.assertLogs(
                "ga4gh.cts.compliance.variant_annotations", "DEBUG") as logs:
            results = self.runSuite(
                datarepo.ComplianceDataRepository(),
                [compliance.VARIANT_ANNOTATIONS])
        self.assertTrue(results.wasSuccessful())
        self.assertEqual(len(logs.output), 3)
