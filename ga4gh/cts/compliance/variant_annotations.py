"""
Tests dealing with searching for VariantAnnotations.
"""
from __future__ import division
from __future__ import print_function
from __future__ import unicode_literals

import ga4gh.cts.compliance as compliance
import ga4gh.cts.compliance.utils as utils
import ga4gh.cts.protocol as protocol


def getImpact(transcriptEffect):
    """
    Returns the values of the transcript effect's "impact" attribute.
    """
    attr = transcriptEffect.attributes.attr
    if "impact" not in attr:
        return []
    return protocol.getAttribute(attr["impact"].values)


class VariantAnnotationsSearchTest(compliance.ComplianceTestCase):

    category = compliance.VARIANT_ANNOTATIONS

    # Define test region
    start = 10177
    end = 11008
    expectedNumberOfAnnotations = 10

    def checkAllVariantAnnotations(self, variantAnnotations, check):
        """
        Calls check on every VariantAnnotation in the list.
        """
        for variantAnnotation in variantAnnotations:
            check(variantAnnotation)

    def checkAllTranscriptEffects(self, variantAnnotations, check):
        """
        Calls check on every TranscriptEffect of every VariantAnnotation
        in the list.
        """
        for variantAnnotation in variantAnnotations:
            for transcriptEffect in variantAnnotation.transcript_effects:
                check(transcriptEffect)

    def searchVariantAnnotations(self, variantAnnotationSetId, featureIds=()):
        """
        Seeks the variant annotation records of the specified
        VariantAnnotationSet in the test region, returning a single page.
        """
        request = protocol.SearchVariantAnnotationsRequest()
        request.variant_annotation_set_id = variantAnnotationSetId
        request.reference_name = \
            self.config["VARIANT_ANNOTATION_REFERENCE_NAME"]
        request.start = self.start
        request.end = self.end
        request.feature_ids.extend(featureIds)
        response = self.client.variant_annotations.search_variant_annotations(
            request)
        return list(response.variant_annotations)

    def getVariantAnnotationSetId(self):
        # Obtain a VariantAnnotationSet from the compliance dataset.
        variantAnnotationSetId = utils.get_variant_annotation_set_id(
            self.client, self.config["DATASET_NAME"],
            self.config["VARIANT_SET_NAME"])
        self.log.debug(
            "searching variant annotation set %s", variantAnnotationSetId)
        return variantAnnotationSetId

    def testSearchingVariantAnnotations(self):
        variantAnnotationSetId = self.getVariantAnnotationSetId()
        variantAnnotations = self.searchVariantAnnotations(
            variantAnnotationSetId)

        # Check something was returned
        self.assertNotEqual(variantAnnotations, [])

        # Check the correct number were returned
        self.assertEqual(
            len(variantAnnotations), self.expectedNumberOfAnnotations)

        self.checkAllVariantAnnotations(
            variantAnnotations, lambda v: self.assertTrue(v.id))
        self.checkAllVariantAnnotations(
            variantAnnotations, lambda v: self.assertTrue(v.variant_id))
        self.checkAllVariantAnnotations(
            variantAnnotations,
            lambda v: self.assertEqual(
                v.variant_annotation_set_id, variantAnnotationSetId))

    def testTranscriptEffects(self):
        """
        Check TranscriptEffect records have the mandatory data.
        """
        variantAnnotationSetId = self.getVariantAnnotationSetId()
        variantAnnotations = self.searchVariantAnnotations(
            variantAnnotationSetId)

        self.checkAllTranscriptEffects(
            variantAnnotations, lambda t: self.assertTrue(t.feature_id))
        self.checkAllTranscriptEffects(
            variantAnnotations, lambda t: self.assertTrue(t.alternate_bases))
        self.checkAllTranscriptEffects(
            variantAnnotations, lambda t: self.assertTrue(getImpact(t)))
        self.checkAllTranscriptEffects(
            variantAnnotations, lambda t: self.assertNotEqual(
                len(t.effects), 0))

    def testSearchingVariantAnnotationsByFeature(self):
        """
        Check filtering by feature id.
        """
        filterFeatures = utils.a_single("NR_046018.2")

        variantAnnotationSetId = self.getVariantAnnotationSetId()
        variantAnnotations = self.searchVariantAnnotations(
            variantAnnotationSetId, filterFeatures)
        self.assertNotEqual(variantAnnotations, [])

        # Check the correct number were returned
        self.assertEqual(
            len(variantAnnotations), self.expectedNumberOfAnnotations)

        # Check transcriptEffect records all list the required feature
        self.checkAllTranscriptEffects(
            variantAnnotations,
            lambda t: self.assertEqual(t.feature_id, filterFeatures[0]))
