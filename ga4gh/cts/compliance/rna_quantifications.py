"""
Tests for GET /rnaquantifications/{id}.
"""
from __future__ import division
from __future__ import print_function
from __future__ import unicode_literals

import ga4gh.cts.compliance as compliance
import ga4gh.cts.compliance.utils as utils


class RnaQuantificationGetByIdTest(compliance.ComplianceTestCase):

    category = compliance.RNA_QUANTIFICATIONS

    def testRnaQuantificationGetResultsMatchSearchResults(self):
        """
        Verify that the RnaQuantifications we obtain by searching the
        compliance set match the ones we get via
        GET /rnaquantifications/{id}.
        """
        expectedNumberOfRnaQuantifications = 1

        rnaQuantificationSetId = utils.get_rna_quantification_set_id(
            self.client, self.config["DATASET_NAME"],
            self.config["RNA_QUANTIFICATION_SET_NAME"])
        rnaQuantifications = utils.get_all_rna_quantifications(
            self.client, rnaQuantificationSetId)
        self.log.debug(
            "RNA quantification set %s has %d quantifications",
            rnaQuantificationSetId, len(rnaQuantifications))

        self.assertEqual(
            len(rnaQuantifications), expectedNumberOfRnaQuantifications)

        for rnaQuantificationFromSearch in rnaQuantifications:
            rnaQuantificationFromGet = \
                self.client.rna_quantifications.get_rna_quantification(
                    rnaQuantificationFromSearch.id)
            self.assertIsNotNone(rnaQuantificationFromGet)

            self.assertEqual(
                rnaQuantificationFromGet, rnaQuantificationFromSearch)
